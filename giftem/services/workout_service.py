import logging
from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID

from giftem.models.api.workouts import (
    WorkoutCategory,
    WorkoutRequest,
    WorkoutResponse,
    WorkoutSessionResponse,
    WorkoutStats,
)
from giftem.repositories.settings_repository import SettingsStore
from giftem.repositories.workout_repository import (
    WorkoutRepository,
    WorkoutSessionRepository,
)
from giftem.scheduling import Scheduler

logger = logging.getLogger(__name__)

WORKOUTS_KEY = "workouts"
SESSIONS_KEY = "workout_sessions"

RECENT_LIMIT = 5


def start_of_week(moment: datetime) -> datetime:
    """Midnight on the Monday of the week containing 'moment'."""
    midnight = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=midnight.weekday())


class WorkoutService:
    """Service for workout templates and logged sessions.

    At most one session is in progress; it lives in memory only and is
    appended to the history when it ends.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        settings_store: Optional[SettingsStore] = None,
        workouts: Optional[List[WorkoutResponse]] = None,
    ):
        self.scheduler = scheduler
        self.settings_store = settings_store
        self.workout_repo = WorkoutRepository(workouts)
        self.session_repo = WorkoutSessionRepository()
        self.current_session: Optional[WorkoutSessionResponse] = None

    async def load(self) -> None:
        if self.settings_store is None:
            return
        workouts = await self.settings_store.load(WORKOUTS_KEY)
        if workouts:
            self.workout_repo.replace_all(
                WorkoutResponse.model_validate(w) for w in workouts
            )
        sessions = await self.settings_store.load(SESSIONS_KEY)
        if sessions:
            self.session_repo.replace_all(
                WorkoutSessionResponse.model_validate(s) for s in sessions
            )
        logger.info(
            "Loaded %d workouts and %d sessions from local mirror",
            len(self.workout_repo),
            len(self.session_repo),
        )

    async def _save_workouts(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                WORKOUTS_KEY,
                [w.model_dump(mode="json") for w in self.workout_repo.records],
            )

    async def _save_sessions(self) -> None:
        if self.settings_store is not None:
            await self.settings_store.save(
                SESSIONS_KEY,
                [s.model_dump(mode="json") for s in self.session_repo.records],
            )

    # Workouts

    def list_workouts(
        self, category: Optional[WorkoutCategory] = None
    ) -> List[WorkoutResponse]:
        if category is not None:
            return self.workout_repo.get_by_category(category)
        return self.workout_repo.get_all()

    def get_workout(self, workout_id: UUID) -> Optional[WorkoutResponse]:
        return self.workout_repo.get_by_id(workout_id)

    def recent_workouts(self, limit: int = RECENT_LIMIT) -> List[WorkoutResponse]:
        """Workouts ordered by last performance, falling back to creation time."""
        if limit < 0:
            raise ValueError("Limit must be non-negative")
        ranked = sorted(
            self.workout_repo.records,
            key=lambda w: w.last_performed or w.date_created,
            reverse=True,
        )
        return ranked[:limit]

    async def add_workout(self, request: WorkoutRequest) -> WorkoutResponse:
        if not request.name.strip():
            raise ValueError("Workout name must not be blank")
        workout = self.workout_repo.create(
            WorkoutResponse(
                name=request.name.strip(),
                exercises=request.exercises,
                category=request.category,
                difficulty=request.difficulty,
                date_created=self.scheduler.now(),
            )
        )
        await self._save_workouts()
        logger.info("Created workout %s (%s)", workout.id, workout.name)
        return workout

    async def update_workout(
        self, workout_id: UUID, request: WorkoutRequest
    ) -> Optional[WorkoutResponse]:
        """Replace a workout's contents, keeping its ID and history fields."""
        workout = self.workout_repo.get_by_id(workout_id)
        if workout is None:
            return None
        if not request.name.strip():
            raise ValueError("Workout name must not be blank")
        updated = workout.model_copy(
            update={
                "name": request.name.strip(),
                "exercises": request.exercises,
                "category": request.category,
                "difficulty": request.difficulty,
            }
        )
        self.workout_repo.update(updated)
        await self._save_workouts()
        return updated

    async def delete_workout(self, workout_id: UUID) -> bool:
        if not self.workout_repo.delete(workout_id):
            return False
        await self._save_workouts()
        return True

    # Sessions

    def start_session(self, workout_id: UUID) -> Optional[WorkoutSessionResponse]:
        """Begin a session for a workout, replacing any session in progress."""
        workout = self.workout_repo.get_by_id(workout_id)
        if workout is None:
            return None
        if self.current_session is not None:
            logger.warning(
                "Discarding unfinished session %s", self.current_session.id
            )
        self.current_session = WorkoutSessionResponse(
            workout=workout, start_time=self.scheduler.now()
        )
        return self.current_session

    async def end_session(
        self, total_calories: int = 0, notes: str = ""
    ) -> Optional[WorkoutSessionResponse]:
        """
        Finish the session in progress:

        1. Stamp the end time and append the session to the history
        2. Record the performance time on the workout, if it still exists
        3. Clear the current session and mirror both lists
        """
        session = self.current_session
        if session is None:
            return None
        if total_calories < 0:
            raise ValueError("Calories must be non-negative")

        now = self.scheduler.now()
        finished = session.model_copy(
            update={"end_time": now, "total_calories": total_calories, "notes": notes}
        )
        self.session_repo.create(finished)

        workout = self.workout_repo.get_by_id(session.workout.id)
        if workout is not None:
            self.workout_repo.update(workout.model_copy(update={"last_performed": now}))

        self.current_session = None
        await self._save_sessions()
        await self._save_workouts()
        return finished

    def history(self) -> List[WorkoutSessionResponse]:
        return sorted(
            self.session_repo.records, key=lambda s: s.start_time, reverse=True
        )

    def stats(self) -> WorkoutStats:
        completed = [s for s in self.session_repo.records if s.is_completed]
        total_duration = sum(s.duration for s in completed)
        week_start = start_of_week(self.scheduler.now())
        week_end = week_start + timedelta(days=7)
        return WorkoutStats(
            total_workouts=len(completed),
            total_duration=total_duration,
            total_calories=sum(s.total_calories for s in completed),
            this_week_workouts=sum(
                1 for s in completed if week_start <= s.start_time < week_end
            ),
            average_workout_duration=(
                total_duration / len(completed) if completed else 0.0
            ),
        )
