# apps/core/http.py
import json
from functools import wraps
from django.http import JsonResponse


class InvalidPayload(ValueError):
    pass


def parse_json_body(request) -> dict:
    """Wczytuje body żądania jako słownik JSON."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidPayload(f"Malformed JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidPayload("Expected a JSON object")
    return data


def json_error(message: str, status: int, details=None) -> JsonResponse:
    payload = {'error': message}
    if details is not None:
        payload['details'] = details
    return JsonResponse(payload, status=status)


def form_error(form) -> JsonResponse:
    # {pole: [komunikaty]}
    details = {field: [str(e) for e in errors] for field, errors in form.errors.items()}
    return json_error('Invalid request data', 400, details)


def api_login_required(view_func):
    """Jak `login_required`, ale zamiast przekierowania zwraca JSON 401."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error('Unauthorized', 401)
        return view_func(request, *args, **kwargs)
    return _wrapped
