"""Exercise catalog reader: global exercises plus the caller's custom ones."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.core.errors import require_user
from lifting_diary.db.base import INT32_MAX
from lifting_diary.models.exercise import Exercise


def visible_to(user_id: str):
    """WHERE clause for exercises the user may see."""
    return or_(Exercise.is_custom.is_(False), Exercise.user_id == user_id)


async def get_exercises(session: AsyncSession, user_id: str | None) -> list[Exercise]:
    """All exercises visible to the user, ordered by name."""
    uid = require_user(user_id)
    r = await session.execute(select(Exercise).where(visible_to(uid)).order_by(Exercise.name))
    return list(r.scalars().all())


async def get_exercise_by_id(session: AsyncSession, user_id: str | None, exercise_id: int) -> Exercise | None:
    """
    Return the exercise, or None when it does not exist or is a custom exercise
    owned by someone else (the two cases are indistinguishable to the caller).
    """
    uid = require_user(user_id)
    if not 1 <= exercise_id <= INT32_MAX:
        return None
    r = await session.execute(
        select(Exercise).where(Exercise.id == exercise_id, visible_to(uid)).limit(1)
    )
    return r.scalar_one_or_none()
