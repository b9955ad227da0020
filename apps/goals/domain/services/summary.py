# apps/goals/domain/services/summary.py
from datetime import datetime, timedelta
from typing import Iterable

from django.utils.timesince import timesince, timeuntil

from apps.goals.domain.entities import GoalEntity, GoalSummary, ProgressEntity
from apps.goals.domain.services.progress import (
    DEFAULT_URGENCY_THRESHOLD_DAYS, as_datetime, calculate_progress, is_overdue, is_urgent,
)
from apps.goals.domain.services.streak import local_day

NO_ENTRIES_LABEL = 'No entries yet'


def format_relative_time(value: datetime, now: datetime) -> str:
    value = as_datetime(value, now)
    today = local_day(now, now)
    day = local_day(value, now)

    if day == today:
        return 'Today'
    if day == today - timedelta(days=1):
        return 'Yesterday'

    # Django wstawia twarde spacje (\xa0), JSON-owi to niepotrzebne
    if value > now:
        return 'in ' + timeuntil(value, now, depth=1).replace('\xa0', ' ')
    return timesince(value, now, depth=1).replace('\xa0', ' ') + ' ago'


def summarize_goal(
        goal: GoalEntity,
        entries: Iterable[ProgressEntity],
        now: datetime,
        urgency_threshold: int = DEFAULT_URGENCY_THRESHOLD_DAYS
    ) -> GoalSummary:
    """Widok celu z wyliczonymi polami: aktualna wartość, postęp, pilność."""
    latest = max(entries, key=lambda e: as_datetime(e.recorded_at, now), default=None)

    current_value = latest.value if latest else 0
    current_unit = latest.unit if latest else goal.target_unit

    return GoalSummary(
        goal=goal,
        current_value=current_value,
        current_unit=current_unit,
        progress_percentage=calculate_progress(current_value, goal.target_value),
        last_entry=format_relative_time(latest.recorded_at, now) if latest else NO_ENTRIES_LABEL,
        urgent=is_urgent(goal.target_date, now, urgency_threshold),
        overdue=is_overdue(goal.target_date, now),
    )
