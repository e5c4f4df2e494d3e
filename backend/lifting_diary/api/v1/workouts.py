"""Workouts API: log a session (whole aggregate in one request) and read sessions back."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.api.deps import get_current_user_id
from lifting_diary.db.session import get_db
from lifting_diary.schemas.workout import WorkoutCreate, WorkoutDetail, WorkoutResponse
from lifting_diary.services.workouts import (
    create_workout,
    get_recent_workouts,
    get_workout_by_id,
    get_workouts_by_date,
)

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get(
    "",
    response_model=list[WorkoutResponse],
    summary="List workouts for a date",
    responses={401: {"description": "Not authenticated"}},
)
async def list_workouts(
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    day: Annotated[date | None, Query(alias="date")] = None,
) -> list[WorkoutResponse]:
    """Workouts dated on `date` (default today), most recently started first."""
    rows = await get_workouts_by_date(session, user_id, day or date.today())
    return [WorkoutResponse.model_validate(r) for r in rows]


@router.get(
    "/recent",
    response_model=list[WorkoutResponse],
    summary="Recent workouts",
    responses={401: {"description": "Not authenticated"}},
)
async def list_recent_workouts(
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
) -> list[WorkoutResponse]:
    rows = await get_recent_workouts(session, user_id)
    return [WorkoutResponse.model_validate(r) for r in rows]


@router.get(
    "/{workout_id}",
    response_model=WorkoutDetail,
    summary="Get workout with exercises and sets",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Workout not found"}},
)
async def read_workout(
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    workout_id: int,
) -> WorkoutDetail:
    detail = await get_workout_by_id(session, user_id, workout_id)
    if not detail:
        raise HTTPException(status_code=404, detail="Workout not found.")
    return detail


@router.post(
    "",
    status_code=303,
    summary="Log workout",
    responses={
        303: {"description": "Created; redirects to the dashboard for the workout date"},
        401: {"description": "Not authenticated"},
        422: {"description": "Invalid workout"},
    },
)
async def post_workout(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    body: WorkoutCreate,
) -> RedirectResponse:
    """Create the workout, its exercises and sets in one transaction, then go to the dashboard."""
    workout = await create_workout(session, user_id, body.title, body.workout_date, body.exercises)
    url = request.url_for("read_dashboard").include_query_params(date=body.workout_date.isoformat())
    response = RedirectResponse(url=str(url), status_code=303)
    response.headers["X-Workout-Id"] = str(workout.id)
    return response
