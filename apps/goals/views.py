import logging
from django.conf import settings
from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_http_methods
from apps.core.http import InvalidPayload, api_login_required, form_error, json_error, parse_json_body
from .adapters.orm_repositories import DjangoGoalRepository
from .application.analytics import GoalAnalyticsService, GoalNotFound
from .domain.entities import GoalStatus
from .domain.services import milestone_for
from .forms import GoalForm
from .models import Goal

logger = logging.getLogger(__name__)


def _analytics():
    return GoalAnalyticsService(DjangoGoalRepository(), urgency_threshold=settings.URGENCY_THRESHOLD_DAYS)


def _active_limit_reached(user, exclude_pk=None) -> bool:
    qs = Goal.objects.filter(user=user, status=Goal.Status.ACTIVE)
    if exclude_pk:
        qs = qs.exclude(pk=exclude_pk)
    return qs.count() >= settings.MAX_ACTIVE_GOALS


def _limit_error():
    return json_error(f"You can have a maximum of {settings.MAX_ACTIVE_GOALS} active goals.", 400)


@require_http_methods(["GET", "POST"])
@api_login_required
def goal_collection_view(request):
    """Lista celów użytkownika (GET) lub nowy cel (POST)."""
    if request.method == 'GET':
        status = request.GET.get('status')
        try:
            status = GoalStatus(status) if status else None
        except ValueError:
            return json_error('Invalid request data', 400, {'status': [f"Unknown status: {status}"]})

        summaries = _analytics().summaries(request.user.id, timezone.localtime(), status=status)
        return JsonResponse({'goals': [s.to_dict() for s in summaries]})

    try:
        data = parse_json_body(request)
    except InvalidPayload as exc:
        return json_error('Invalid request data', 400, str(exc))

    form = GoalForm(data)
    if not form.is_valid():
        return form_error(form)

    if form.cleaned_data['status'] == Goal.Status.ACTIVE and _active_limit_reached(request.user):
        return _limit_error()

    goal = form.save(commit=False)
    goal.user = request.user
    goal.save()
    logger.info("Goal %s created for user %s", goal.pk, request.user.pk)

    summary = _analytics().summary(goal.pk, request.user.id, timezone.localtime())
    return JsonResponse({'goal': summary.to_dict()}, status=201)


@require_http_methods(["GET", "PUT", "DELETE"])
@api_login_required
def goal_detail_view(request, pk):
    goal = get_object_or_404(Goal, pk=pk, user=request.user)

    if request.method == 'DELETE':
        # Wpisy postępu usuwa kaskada
        goal.delete()
        logger.info("Goal %s deleted by user %s", pk, request.user.pk)
        return JsonResponse({'message': 'Goal deleted successfully'})

    if request.method == 'PUT':
        try:
            body = parse_json_body(request)
        except InvalidPayload as exc:
            return json_error('Invalid request data', 400, str(exc))

        # Częściowa aktualizacja: brakujące pola bierzemy z bazy
        old_status = goal.status
        data = model_to_dict(goal, fields=GoalForm.Meta.fields)
        data.update(body)

        form = GoalForm(data, instance=goal)
        if not form.is_valid():
            return form_error(form)

        reactivated = old_status != Goal.Status.ACTIVE and form.cleaned_data['status'] == Goal.Status.ACTIVE
        if reactivated and _active_limit_reached(request.user, exclude_pk=goal.pk):
            return _limit_error()

        goal = form.save()
        if old_status != goal.status and goal.status == Goal.Status.COMPLETED:
            logger.info("Goal %s completed by user %s", goal.pk, request.user.pk)

    now = timezone.localtime()
    analytics = _analytics()
    payload = analytics.summary(goal.pk, request.user.id, now).to_dict()
    payload['streak'] = analytics.streak(goal.pk, request.user.id, now).to_dict()
    return JsonResponse({'goal': payload})


@require_http_methods(["GET"])
@api_login_required
def goal_streak_view(request, pk):
    try:
        streak = _analytics().streak(pk, request.user.id, timezone.localtime())
    except GoalNotFound:
        return json_error('Goal not found', 404)

    payload = streak.to_dict()
    milestone = milestone_for(streak.current)
    payload['milestone'] = {'days': milestone.days, 'message': milestone.message} if milestone else None
    return JsonResponse(payload)


@require_http_methods(["GET"])
@api_login_required
def goal_chart_view(request, pk):
    """Dane do wykresu (Chart.js): {labels, values, target}."""
    time_range = request.GET.get('range', 'all')
    try:
        series = _analytics().chart(pk, request.user.id, time_range, timezone.localtime())
    except GoalNotFound:
        return json_error('Goal not found', 404)

    return JsonResponse(series.to_dict())
