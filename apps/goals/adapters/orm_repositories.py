# apps/goals/adapters/orm_repositories.py
from typing import Dict, List, Optional
from apps.goals.domain.entities import GoalCategory, GoalEntity, GoalStatus, ProgressEntity
from apps.goals.ports.repositories import IGoalRepository
from apps.goals.models import Goal as GoalModel
from apps.progress.models import ProgressEntry as ProgressModel


class DjangoGoalRepository(IGoalRepository):
    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.id,
            category=GoalCategory(model.category),
            description=model.description,
            target_value=model.target_value,
            target_unit=model.target_unit,
            target_date=model.target_date,
            cadence=model.cadence,
            status=GoalStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def entry_to_entity(self, model: ProgressModel) -> ProgressEntity:
        return ProgressEntity(
            id=model.id,
            goal_id=model.goal_id,
            value=model.value,
            unit=model.unit,
            recorded_at=model.recorded_at,
            note=model.note,
        )

    def get_for_user(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        try:
            goal = GoalModel.objects.get(id=goal_id, user_id=user_id)
            return self.to_entity(goal)
        except GoalModel.DoesNotExist:
            return None

    def list_for_user(self, user_id: int, status: Optional[GoalStatus] = None) -> List[GoalEntity]:
        qs = GoalModel.objects.filter(user_id=user_id)
        if status is not None:
            qs = qs.filter(status=status.value)
        return [self.to_entity(g) for g in qs]

    def entries_for_goal(self, goal_id: int) -> List[ProgressEntity]:
        qs = ProgressModel.objects.filter(goal_id=goal_id)
        return [self.entry_to_entity(e) for e in qs]

    def entries_for_goals(self, goal_ids: List[int]) -> Dict[int, List[ProgressEntity]]:
        """Wpisy pogrupowane po celu - jedno zapytanie zamiast N."""
        grouped = {goal_id: [] for goal_id in goal_ids}
        for entry in ProgressModel.objects.filter(goal_id__in=goal_ids):
            grouped[entry.goal_id].append(self.entry_to_entity(entry))
        return grouped
