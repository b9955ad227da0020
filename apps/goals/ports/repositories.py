# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from apps.goals.domain.entities import GoalEntity, GoalStatus, ProgressEntity


class IGoalRepository(ABC):
    @abstractmethod
    def get_for_user(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        """Zwraca cel tylko jeśli należy do użytkownika."""
        pass

    @abstractmethod
    def list_for_user(self, user_id: int, status: Optional[GoalStatus] = None) -> List[GoalEntity]:
        pass

    @abstractmethod
    def entries_for_goal(self, goal_id: int) -> List[ProgressEntity]:
        pass

    @abstractmethod
    def entries_for_goals(self, goal_ids: List[int]) -> Dict[int, List[ProgressEntity]]:
        """Zwraca {goal_id: [wpisy]} dla wielu celów naraz."""
        pass
