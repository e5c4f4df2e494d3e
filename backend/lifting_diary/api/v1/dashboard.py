"""Dashboard API: workout summaries for a calendar date (?date=YYYY-MM-DD, default today)."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.api.deps import get_current_user_id
from lifting_diary.db.session import get_db
from lifting_diary.schemas.dashboard import DashboardResponse
from lifting_diary.services.dashboard import get_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Dashboard for a date",
    responses={401: {"description": "Not authenticated"}, 422: {"description": "Malformed date"}},
)
async def read_dashboard(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[str, Depends(get_current_user_id)],
    day: Annotated[date | None, Query(alias="date")] = None,
) -> DashboardResponse:
    # Always rendered from the database so a new workout shows up right after the redirect
    response.headers["Cache-Control"] = "no-store"
    return await get_dashboard(session, user_id, day or date.today())
