# apps/goals/domain/services/progress.py
import math
from datetime import date, datetime, time, timedelta
from typing import Union

DEFAULT_URGENCY_THRESHOLD_DAYS = 7


def calculate_progress(current_value: float, target_value: float) -> int:
    """Postęp w procentach (0-100). Cel <= 0 to zawsze 0%."""
    if target_value <= 0:
        return 0

    ratio = (current_value / target_value) * 100
    # Zaokrąglenie "połówka w górę" (round() w Pythonie zaokrągla do parzystej)
    percentage = math.floor(ratio + 0.5)
    return max(0, min(percentage, 100))


def as_datetime(target: Union[date, datetime], now: datetime) -> datetime:
    if isinstance(target, datetime):
        # Obsługa stref czasowych
        if target.tzinfo and not now.tzinfo:
            return target.replace(tzinfo=None)
        if now.tzinfo and not target.tzinfo:
            return target.replace(tzinfo=now.tzinfo)
        return target

    # Sama data = północ tego dnia w strefie 'now'
    return datetime.combine(target, time.min, tzinfo=now.tzinfo)


def days_until(target_date: Union[date, datetime], now: datetime) -> int:
    time_left = as_datetime(target_date, now) - now
    return math.ceil(time_left / timedelta(days=1))


def is_urgent(
        target_date: Union[date, datetime],
        now: datetime,
        threshold: int = DEFAULT_URGENCY_THRESHOLD_DAYS
    ) -> bool:
    """Cel jest pilny, gdy termin mija w ciągu `threshold` dni (ale jeszcze nie minął)."""
    days_left = days_until(target_date, now)
    return 0 < days_left <= threshold


def is_overdue(target_date: Union[date, datetime], now: datetime) -> bool:
    return days_until(target_date, now) <= 0
