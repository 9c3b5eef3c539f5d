from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class WorkoutCategory(str, Enum):
    STRENGTH = "Strength"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    SPORTS = "Sports"
    FUNCTIONAL = "Functional"
    HIIT = "HIIT"
    YOGA = "Yoga"
    PILATES = "Pilates"


class ExerciseCategory(str, Enum):
    STRENGTH = "Strength"
    CARDIO = "Cardio"
    FLEXIBILITY = "Flexibility"
    BALANCE = "Balance"
    ENDURANCE = "Endurance"
    POWER = "Power"
    MOBILITY = "Mobility"


class ExerciseSet(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    reps: int = 0
    weight: float = 0.0
    duration: Optional[float] = None  # Seconds, for time-based exercises
    is_completed: bool = False


class Exercise(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    sets: List[ExerciseSet] = Field(default_factory=list)
    rest_time: float = 60.0
    notes: str = ""
    category: ExerciseCategory = ExerciseCategory.STRENGTH


class WorkoutRequest(BaseModel):
    """Request model for creating or replacing a workout."""

    name: str = Field(..., description="Workout name")
    exercises: List[Exercise] = Field(default_factory=list)
    category: WorkoutCategory = WorkoutCategory.STRENGTH
    difficulty: Difficulty = Difficulty.BEGINNER


class WorkoutResponse(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    exercises: List[Exercise] = Field(default_factory=list)
    date_created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_performed: Optional[datetime] = None
    total_duration: float = 0.0
    difficulty: Difficulty = Difficulty.BEGINNER
    category: WorkoutCategory = WorkoutCategory.STRENGTH

    model_config = ConfigDict(frozen=True)


class StartSessionRequest(BaseModel):
    workout_id: UUID


class EndSessionRequest(BaseModel):
    total_calories: int = Field(0, description="Calories burned in the session")
    notes: str = ""


class WorkoutSessionResponse(BaseModel):
    """One performance of a workout; completed once it has an end time."""

    id: UUID = Field(default_factory=uuid4)
    workout: WorkoutResponse
    start_time: datetime
    end_time: Optional[datetime] = None
    completed_exercises: List[Exercise] = Field(default_factory=list)
    total_calories: int = 0
    notes: str = ""

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_completed(self) -> bool:
        return self.end_time is not None


class WorkoutStats(BaseModel):
    total_workouts: int
    total_duration: float
    total_calories: int
    this_week_workouts: int
    average_workout_duration: float
