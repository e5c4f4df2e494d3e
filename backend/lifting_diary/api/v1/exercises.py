"""Exercise catalog API: global exercises plus the caller's custom ones."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.api.deps import get_current_user_id
from lifting_diary.db.session import get_db
from lifting_diary.schemas.exercise import ExerciseResponse
from lifting_diary.services.exercises import get_exercise_by_id, get_exercises

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get(
    "",
    response_model=list[ExerciseResponse],
    summary="List exercises",
    responses={401: {"description": "Not authenticated"}},
)
async def list_exercises(
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
) -> list[ExerciseResponse]:
    """Exercises visible to the caller, ordered by name."""
    rows = await get_exercises(session, user_id)
    return [ExerciseResponse.model_validate(r) for r in rows]


@router.get(
    "/{exercise_id}",
    response_model=ExerciseResponse,
    summary="Get exercise",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Exercise not found"}},
)
async def read_exercise(
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    exercise_id: int,
) -> ExerciseResponse:
    exercise = await get_exercise_by_id(session, user_id, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found.")
    return ExerciseResponse.model_validate(exercise)
