import logging
import math
from django.core.paginator import EmptyPage, Paginator
from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods
from apps.core.http import InvalidPayload, api_login_required, form_error, json_error, parse_json_body
from .filters import ProgressEntryFilter
from .forms import ProgressEntryForm
from .models import ProgressEntry

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def entry_to_dict(entry: ProgressEntry) -> dict:
    return {
        'id': entry.id,
        'goalId': entry.goal_id,
        'value': entry.value,
        'unit': entry.unit,
        'note': entry.note,
        'recordedAt': entry.recorded_at.isoformat(),
        'goal': {
            'id': entry.goal.id,
            'description': entry.goal.description,
            'category': entry.goal.category,
        },
    }


def _positive_int(raw, default, maximum=None):
    if raw in (None, ''):
        return default
    value = int(raw)  # ValueError łapie wywołujący
    if value < 1 or (maximum and value > maximum):
        raise ValueError(f"{raw} is out of range")
    return value


def _list_entries(request):
    try:
        page = _positive_int(request.GET.get('page'), 1)
        limit = _positive_int(request.GET.get('limit'), DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)
    except ValueError as exc:
        return json_error('Invalid query parameters', 400, str(exc))

    base_qs = ProgressEntry.objects.filter(goal__user=request.user).select_related('goal')
    filterset = ProgressEntryFilter(request.GET, queryset=base_qs)
    if not filterset.is_valid():
        return form_error(filterset.form)

    qs = filterset.qs.order_by('-recorded_at')
    paginator = Paginator(qs, limit)
    try:
        entries = list(paginator.page(page).object_list)
    except EmptyPage:
        entries = []

    total = paginator.count
    return JsonResponse({
        'data': [entry_to_dict(e) for e in entries],
        'pagination': {
            'page': page,
            'limit': limit,
            'totalCount': total,
            'totalPages': math.ceil(total / limit),
        },
    })


@require_http_methods(["GET", "POST"])
@api_login_required
def progress_collection_view(request):
    """Lista wpisów (filtry: goal, time_range, unit) albo nowy wpis."""
    if request.method == 'GET':
        return _list_entries(request)

    try:
        data = parse_json_body(request)
    except InvalidPayload as exc:
        return json_error('Invalid request data', 400, str(exc))

    form = ProgressEntryForm(request.user, data)
    if not form.is_valid():
        if 'goal' in form.errors and data.get('goal') not in (None, ''):
            return json_error('Goal not found', 404)
        return form_error(form)

    entry = form.save()
    logger.info("Progress entry %s added to goal %s", entry.pk, entry.goal_id)
    return JsonResponse(entry_to_dict(entry), status=201)


@require_http_methods(["GET", "PUT", "DELETE"])
@api_login_required
def progress_detail_view(request, pk):
    entry = get_object_or_404(ProgressEntry.objects.select_related('goal'), pk=pk, goal__user=request.user)

    if request.method == 'DELETE':
        entry.delete()
        logger.info("Progress entry %s deleted", pk)
        return JsonResponse({'message': 'Progress entry deleted successfully'})

    if request.method == 'PUT':
        try:
            body = parse_json_body(request)
        except InvalidPayload as exc:
            return json_error('Invalid request data', 400, str(exc))

        # Wpis zostaje przy swoim celu
        data = model_to_dict(entry, fields=ProgressEntryForm.Meta.fields)
        data.update(body)
        data['goal'] = entry.goal_id

        form = ProgressEntryForm(request.user, data, instance=entry)
        if not form.is_valid():
            return form_error(form)
        entry = form.save()

    return JsonResponse(entry_to_dict(entry))
