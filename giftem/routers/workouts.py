import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from giftem.dependencies import get_workout_service
from giftem.models.api.workouts import (
    EndSessionRequest,
    StartSessionRequest,
    WorkoutCategory,
    WorkoutRequest,
    WorkoutResponse,
    WorkoutSessionResponse,
    WorkoutStats,
)
from giftem.services.workout_service import RECENT_LIMIT, WorkoutService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[WorkoutResponse])
async def list_workouts(
    category: Optional[WorkoutCategory] = Query(
        None, description="Filter by category"
    ),
    service: WorkoutService = Depends(get_workout_service),
) -> List[WorkoutResponse]:
    return service.list_workouts(category)


@router.post("", response_model=WorkoutResponse)
async def add_workout(
    request: WorkoutRequest, service: WorkoutService = Depends(get_workout_service)
) -> WorkoutResponse:
    """
    Save a new workout template.

    Body:
    - name: Workout name, must not be blank
    - exercises: Exercises with their sets
    - category, difficulty: Optional labels
    """
    try:
        return await service.add_workout(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to save workout %r", request.name)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/recent", response_model=List[WorkoutResponse])
async def recent_workouts(
    limit: int = Query(RECENT_LIMIT, description="Maximum number of workouts", ge=0),
    service: WorkoutService = Depends(get_workout_service),
) -> List[WorkoutResponse]:
    """Workouts by most recent performance, then by creation time."""
    return service.recent_workouts(limit)


@router.get("/stats", response_model=WorkoutStats)
async def workout_stats(
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutStats:
    """Totals over completed sessions; the week starts on Monday (UTC)."""
    return service.stats()


@router.get("/history", response_model=List[WorkoutSessionResponse])
async def workout_history(
    service: WorkoutService = Depends(get_workout_service),
) -> List[WorkoutSessionResponse]:
    """Completed sessions, most recently started first."""
    return service.history()


@router.get("/sessions/current", response_model=WorkoutSessionResponse)
async def current_session(
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutSessionResponse:
    if service.current_session is None:
        raise HTTPException(status_code=404, detail="No session in progress")
    return service.current_session


@router.post("/sessions", response_model=WorkoutSessionResponse)
async def start_session(
    request: StartSessionRequest,
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutSessionResponse:
    """Start a session for a workout, replacing any session in progress."""
    session = service.start_session(request.workout_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return session


@router.post("/sessions/current/end", response_model=WorkoutSessionResponse)
async def end_session(
    request: EndSessionRequest,
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutSessionResponse:
    try:
        session = await service.end_session(request.total_calories, request.notes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if session is None:
        raise HTTPException(status_code=404, detail="No session in progress")
    return session


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: UUID, service: WorkoutService = Depends(get_workout_service)
) -> WorkoutResponse:
    workout = service.get_workout(workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: UUID,
    request: WorkoutRequest,
    service: WorkoutService = Depends(get_workout_service),
) -> WorkoutResponse:
    """Replace a workout's name, exercises and labels."""
    try:
        workout = await service.update_workout(workout_id, request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: UUID, service: WorkoutService = Depends(get_workout_service)
) -> None:
    if not await service.delete_workout(workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
