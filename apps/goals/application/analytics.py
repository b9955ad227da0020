# apps/goals/application/analytics.py
from datetime import datetime
from typing import List, Optional, Union
from apps.goals.domain.entities import (
    ChartSeries, GoalEntity, GoalStatus, GoalSummary, StreakData, TimeRange,
)
from apps.goals.domain.services import (
    build_chart_series, calculate_streak, summarize_goal,
)
from apps.goals.domain.services.progress import DEFAULT_URGENCY_THRESHOLD_DAYS
from apps.goals.ports.repositories import IGoalRepository


class GoalNotFound(LookupError):
    pass


class GoalAnalyticsService:
    """Składa repozytorium z czystymi funkcjami analityki."""

    def __init__(self, repository: IGoalRepository, urgency_threshold: int = DEFAULT_URGENCY_THRESHOLD_DAYS):
        self.repository = repository
        self.urgency_threshold = urgency_threshold

    def _get_goal(self, goal_id: int, user_id: int) -> GoalEntity:
        goal = self.repository.get_for_user(goal_id, user_id)
        if not goal:
            raise GoalNotFound(f"Goal {goal_id} not found")
        return goal

    def summary(self, goal_id: int, user_id: int, now: datetime) -> GoalSummary:
        goal = self._get_goal(goal_id, user_id)
        entries = self.repository.entries_for_goal(goal.id)
        return summarize_goal(goal, entries, now, self.urgency_threshold)

    def summaries(self, user_id: int, now: datetime, status: Optional[GoalStatus] = None) -> List[GoalSummary]:
        goals = self.repository.list_for_user(user_id, status)
        entries = self.repository.entries_for_goals([g.id for g in goals])
        return [
            summarize_goal(goal, entries.get(goal.id, []), now, self.urgency_threshold)
            for goal in goals
        ]

    def streak(self, goal_id: int, user_id: int, now: datetime) -> StreakData:
        goal = self._get_goal(goal_id, user_id)
        return calculate_streak(self.repository.entries_for_goal(goal.id), goal.cadence, now)

    def chart(self, goal_id: int, user_id: int, time_range: Union[TimeRange, str], now: datetime) -> ChartSeries:
        goal = self._get_goal(goal_id, user_id)
        entries = self.repository.entries_for_goal(goal.id)
        return build_chart_series(entries, time_range, now, target=goal.target_value)

    def dashboard(self, user_id: int, now: datetime) -> dict:
        """Dane dla pulpitu: aktywne cele + proste liczniki."""
        summaries = self.summaries(user_id, now, status=GoalStatus.ACTIVE)
        return {
            'goals': [s.to_dict() for s in summaries],
            'activeCount': len(summaries),
            'urgentCount': sum(1 for s in summaries if s.urgent),
            'overdueCount': sum(1 for s in summaries if s.overdue),
            'averageProgress': (
                round(sum(s.progress_percentage for s in summaries) / len(summaries))
                if summaries else 0
            ),
        }
