import logging
import time
from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.utils import timezone
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.application.analytics import GoalAnalyticsService
from .http import InvalidPayload, api_login_required, json_error, parse_json_body

logger = logging.getLogger(__name__)


def check_database():
    """Zwraca (connected, czas odpowiedzi w ms, błąd)."""
    started = time.perf_counter()
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except DatabaseError as exc:
        logger.error("Database health check failed: %s", exc)
        return False, None, str(exc)

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    return True, elapsed_ms, None


@require_GET
def health_view(request):
    connected, response_time, error = check_database()

    return JsonResponse({
        'status': 'healthy' if connected else 'unhealthy',
        'timestamp': timezone.now().isoformat(),
        'services': {
            'database': {
                'connected': connected,
                'responseTime': response_time,
                'error': error,
            },
        },
        'environment': {
            'debug': settings.DEBUG,
            'databaseEngine': settings.DATABASES['default']['ENGINE'],
        },
    }, status=200 if connected else 503)


@require_GET
@api_login_required
def dashboard_view(request):
    """Pulpit: aktywne cele z postępem i licznikami."""
    service = GoalAnalyticsService(DjangoGoalRepository(), urgency_threshold=settings.URGENCY_THRESHOLD_DAYS)
    return JsonResponse(service.dashboard(request.user.id, timezone.localtime()))


@require_GET
@ensure_csrf_cookie
def csrf_view(request):
    """Ustawia ciasteczko csrftoken; token trzeba odsyłać w nagłówku X-CSRFToken."""
    return JsonResponse({'csrfToken': get_token(request)})


@require_POST
def login_view(request):
    try:
        data = parse_json_body(request)
    except InvalidPayload as exc:
        return json_error('Invalid request data', 400, str(exc))

    user = authenticate(request, username=data.get('username'), password=data.get('password'))
    if user is None:
        logger.warning("Failed login attempt for %r", data.get('username'))
        return json_error('Invalid credentials', 401)

    # login() rotuje token CSRF, klient dostaje nowy w ciasteczku
    login(request, user)
    return JsonResponse({'user': {'id': user.pk, 'username': user.get_username()}})


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({'message': 'Logged out'})


def csrf_failure(request, reason=''):
    return json_error('CSRF verification failed', 403, reason)
