# apps/goals/domain/services/chart.py
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Union

from apps.goals.domain.entities import ChartSeries, ProgressEntity, TimeRange
from apps.goals.domain.services.progress import as_datetime


def format_short_date(value: datetime) -> str:
    """Np. 'Oct 3' (bez zera wiodącego, niezależnie od platformy)."""
    return f"{value:%b} {value.day}"


def window_start(time_range: Union[TimeRange, str], now: datetime) -> Optional[datetime]:
    """Początek okna czasowego; None = bez dolnej granicy."""
    days = TimeRange.from_token(time_range).window_days
    if days is None:
        return None
    return now - timedelta(days=days)


def extract_window(
        entries: Iterable[ProgressEntity],
        time_range: Union[TimeRange, str],
        now: datetime
    ) -> List[ProgressEntity]:
    """Wpisy z okna czasowego, posortowane od najstarszego (kolejność dla wykresu)."""
    start = window_start(time_range, now)

    # Porównujemy po sprowadzeniu do strefy `now` (wpisy naiwne lub świadome)
    selected = [e for e in entries if start is None or as_datetime(e.recorded_at, now) >= start]
    return sorted(selected, key=lambda e: as_datetime(e.recorded_at, now))


def build_chart_series(
        entries: Iterable[ProgressEntity],
        time_range: Union[TimeRange, str],
        now: datetime,
        target: Optional[float] = None
    ) -> ChartSeries:
    series = ChartSeries(target=target)

    for entry in extract_window(entries, time_range, now):
        recorded_at = entry.recorded_at
        if recorded_at.tzinfo and now.tzinfo:
            recorded_at = recorded_at.astimezone(now.tzinfo)
        series.labels.append(format_short_date(recorded_at))
        series.values.append(entry.value)

    return series
