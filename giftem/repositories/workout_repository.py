from typing import List

from giftem.models.api.workouts import (
    WorkoutCategory,
    WorkoutResponse,
    WorkoutSessionResponse,
)
from giftem.repositories.base_repository import BaseRepository


class WorkoutRepository(BaseRepository[WorkoutResponse]):
    """Repository for saved workout templates."""

    def get_by_category(self, category: WorkoutCategory) -> List[WorkoutResponse]:
        return [w for w in self.records if w.category == category]


class WorkoutSessionRepository(BaseRepository[WorkoutSessionResponse]):
    """Repository for completed workout sessions, in completion order."""
