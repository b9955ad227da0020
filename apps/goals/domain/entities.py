# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional


class GoalCategory(str, Enum):
    STRENGTH = 'STRENGTH'
    CARDIO = 'CARDIO'
    BODY = 'BODY'
    HABIT = 'HABIT'


class GoalStatus(str, Enum):
    ACTIVE = 'ACTIVE'
    COMPLETED = 'COMPLETED'
    PAUSED = 'PAUSED'


class Cadence(str, Enum):
    DAILY = 'daily'
    THREE_PER_WEEK = '3x-week'
    FIVE_PER_WEEK = '5x-week'
    WEEKLY = 'weekly'

    @property
    def expected_gap_days(self) -> int:
        return _CADENCE_GAPS[self]

    @classmethod
    def gap_for(cls, label) -> int:
        """Oczekiwany odstęp (w dniach) między wpisami. Nieznana etykieta = codziennie."""
        try:
            return cls(label).expected_gap_days
        except ValueError:
            return 1


_CADENCE_GAPS = {
    Cadence.DAILY: 1,
    Cadence.THREE_PER_WEEK: 2,  # mniej więcej co drugi dzień
    Cadence.FIVE_PER_WEEK: 1,
    Cadence.WEEKLY: 7,
}


class TimeRange(str, Enum):
    WEEK = '7d'
    MONTH = '1m'
    QUARTER = '3m'
    ALL = 'all'

    @property
    def window_days(self) -> Optional[int]:
        return _RANGE_DAYS[self]

    @classmethod
    def from_token(cls, token) -> 'TimeRange':
        try:
            return cls(token)
        except ValueError:
            return cls.ALL


_RANGE_DAYS = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
    TimeRange.QUARTER: 90,
    TimeRange.ALL: None,
}


@dataclass
class ProgressEntity:
    id: Optional[int]
    goal_id: Optional[int]
    value: float
    unit: str
    recorded_at: datetime
    note: str = ""


@dataclass
class GoalEntity:
    id: Optional[int]
    category: GoalCategory
    description: str
    target_value: float
    target_unit: str
    target_date: date
    cadence: str = Cadence.DAILY.value
    status: GoalStatus = GoalStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_active(self) -> bool:
        return self.status == GoalStatus.ACTIVE


@dataclass
class StreakData:
    current: int
    longest: int
    last_updated: datetime

    def to_dict(self) -> dict:
        return {
            'current': self.current,
            'longest': self.longest,
            'lastUpdated': self.last_updated.isoformat(),
        }


@dataclass
class ChartSeries:
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    target: Optional[float] = None

    def to_dict(self) -> dict:
        return {'labels': self.labels, 'values': self.values, 'target': self.target}


@dataclass
class GoalSummary:
    goal: GoalEntity
    current_value: float
    current_unit: str
    progress_percentage: int
    last_entry: str
    urgent: bool
    overdue: bool

    def to_dict(self) -> dict:
        goal = self.goal
        return {
            'id': goal.id,
            'category': goal.category.value,
            'description': goal.description,
            'targetValue': goal.target_value,
            'targetUnit': goal.target_unit,
            'targetDate': goal.target_date.isoformat(),
            'cadence': goal.cadence,
            'status': goal.status.value,
            'createdAt': goal.created_at.isoformat() if goal.created_at else None,
            'updatedAt': goal.updated_at.isoformat() if goal.updated_at else None,
            'currentValue': self.current_value,
            'currentUnit': self.current_unit,
            'progressPercentage': self.progress_percentage,
            'lastEntry': self.last_entry,
            'urgent': self.urgent,
            'overdue': self.overdue,
        }
