"""
Workouts router for recording and browsing workout sessions.

This router contains endpoints for:
- /workouts/drafts - Start a new draft
- /workouts/drafts/validate - Check a draft without saving it
- /workouts - Save a draft, list saved workouts
- /workouts/{workout_id} - Get, delete workout

Drafts are held by the client and sent back whole; the server keeps no
per-session state.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.deps import (
    get_delete_workout_use_case,
    get_get_workout_use_case,
    get_save_workout_use_case,
)
from application.use_cases import (
    DeleteWorkoutUseCase,
    GetWorkoutUseCase,
    SaveWorkoutUseCase,
)
from domain.models import DraftWorkout, Workout
from domain.services.workout_session import start_draft, validate_for_save

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class ValidationErrorBody(BaseModel):
    """Why a draft cannot be saved."""
    code: str
    message: str
    exercise_id: Optional[str] = None
    set_index: Optional[int] = None


class ValidateDraftResponse(BaseModel):
    """Response for draft validation."""
    valid: bool
    workout: Optional[Workout] = None
    error: Optional[ValidationErrorBody] = None


class WorkoutListResponse(BaseModel):
    """Response model for the workout list, most recent first."""
    workouts: List[Workout] = []
    count: int = 0
    store_available: bool = True


class DeleteWorkoutResponse(BaseModel):
    """Response for a successful delete."""
    success: bool = True
    workout_id: str


# =============================================================================
# Draft Endpoints
# =============================================================================


@router.post("/workouts/drafts", response_model=DraftWorkout)
def start_draft_endpoint():
    """Start a new empty draft dated now."""
    return start_draft()


@router.post("/workouts/drafts/validate", response_model=ValidateDraftResponse)
def validate_draft_endpoint(draft: DraftWorkout):
    """
    Validate a draft without saving it.

    Returns the normalized workout when valid, otherwise the first error.
    """
    result = validate_for_save(draft)
    if result.success:
        return ValidateDraftResponse(valid=True, workout=result.workout)
    return ValidateDraftResponse(
        valid=False,
        error=ValidationErrorBody(**result.error.to_dict()),
    )


# =============================================================================
# Workout CRUD Endpoints
# =============================================================================


@router.post(
    "/workouts",
    response_model=Workout,
    status_code=201,
)
async def save_workout_endpoint(
    draft: DraftWorkout,
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
):
    """
    Validate and save a draft workout.

    Saving a draft whose id already exists replaces the stored workout.
    """
    result = await use_case.execute(draft)

    if result.validation_error is not None:
        raise HTTPException(
            status_code=422,
            detail=result.validation_error.to_dict(),
        )
    if not result.success:
        raise HTTPException(
            status_code=503,
            detail=result.error or "Failed to save workout",
        )
    return result.workout


@router.get("/workouts", response_model=WorkoutListResponse)
async def list_workouts_endpoint(
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """List saved workouts, most recent date first."""
    result = await use_case.list_workouts()
    return WorkoutListResponse(
        workouts=result.workouts,
        count=result.count,
        store_available=result.store_available,
    )


@router.get("/workouts/{workout_id}", response_model=Workout)
async def get_workout_endpoint(
    workout_id: str,
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Get one workout in detail."""
    result = await use_case.get_workout(workout_id)
    if result.success:
        return result.workout
    if not result.store_available:
        raise HTTPException(
            status_code=503,
            detail=result.error,
        )
    raise HTTPException(status_code=404, detail=result.error)


@router.delete("/workouts/{workout_id}", response_model=DeleteWorkoutResponse)
async def delete_workout_endpoint(
    workout_id: str,
    use_case: DeleteWorkoutUseCase = Depends(get_delete_workout_use_case),
):
    """Delete a workout. Unknown ids succeed."""
    result = await use_case.execute(workout_id)
    if not result.success:
        raise HTTPException(
            status_code=503,
            detail=result.error or "Failed to delete workout",
        )
    return DeleteWorkoutResponse(workout_id=workout_id)
