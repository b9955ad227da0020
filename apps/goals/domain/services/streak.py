# apps/goals/domain/services/streak.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional

from apps.goals.domain.entities import Cadence, ProgressEntity, StreakData
from apps.goals.domain.services.progress import as_datetime

# Jeden dzień "łaski" na spóźnione wpisy
GRACE_PERIOD_DAYS = 1


@dataclass(frozen=True)
class StreakMilestone:
    days: int
    message: str


STREAK_MILESTONES = (
    StreakMilestone(7, 'One week streak!'),
    StreakMilestone(14, 'Two weeks strong!'),
    StreakMilestone(30, 'One month milestone!'),
    StreakMilestone(60, 'Two months amazing!'),
    StreakMilestone(100, '100 days champion!'),
    StreakMilestone(365, 'One year legend!'),
)


def local_day(value: datetime, now: datetime) -> date:
    if value.tzinfo and now.tzinfo:
        value = value.astimezone(now.tzinfo)
    return value.date()


class StreakCalculator:
    def __init__(self, grace_days: int = GRACE_PERIOD_DAYS):
        self.grace_days = grace_days

    def calculate(self, entries: Iterable[ProgressEntity], cadence: str, now: datetime) -> StreakData:
        """
        Liczy bieżącą i najdłuższą serię wpisów dla jednego celu.

        Kilka wpisów z tego samego dnia kalendarzowego to JEDNA jednostka serii.
        """
        entries = sorted(entries, key=lambda e: as_datetime(e.recorded_at, now), reverse=True)
        if not entries:
            return StreakData(current=0, longest=0, last_updated=now)

        gap = Cadence.gap_for(cadence)

        # Unikalne dni, od najnowszego
        days: List[date] = []
        for entry in entries:
            day = local_day(entry.recorded_at, now)
            if not days or days[-1] != day:
                days.append(day)

        current = self._current_streak(days, gap, local_day(now, now))
        longest = self._longest_run(list(reversed(days)), gap)

        return StreakData(
            current=current,
            longest=max(longest, current),
            last_updated=entries[0].recorded_at,
        )

    def _current_streak(self, days_desc: List[date], gap: int, today: date) -> int:
        # Tolerancja rośnie z każdym krokiem wstecz: (i + 1) * gap + łaska
        streak = 0
        for i, day in enumerate(days_desc):
            days_diff = (today - day).days
            if days_diff > (i + 1) * gap + self.grace_days:
                break
            streak += 1
        return streak

    def _longest_run(self, days_asc: List[date], gap: int) -> int:
        longest = 0
        run = 0
        previous: Optional[date] = None

        for day in days_asc:
            if previous is not None and (day - previous).days > gap + self.grace_days:
                run = 0
            run += 1
            longest = max(longest, run)
            previous = day

        return longest


def calculate_streak(entries: Iterable[ProgressEntity], cadence: str, now: datetime) -> StreakData:
    return StreakCalculator().calculate(entries, cadence, now)


def milestone_for(current_streak: int) -> Optional[StreakMilestone]:
    """Najwyższy osiągnięty kamień milowy (albo None)."""
    reached = [m for m in STREAK_MILESTONES if current_streak >= m.days]
    return reached[-1] if reached else None
