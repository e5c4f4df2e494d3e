"""Workout aggregate store: workout -> workout exercises -> sets.

Every function takes the caller's user id explicitly and refuses with
Unauthorized before touching the database when it is missing.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime, time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.config import settings
from lifting_diary.core.errors import WorkoutValidationError, require_user
from lifting_diary.db.base import INT32_MAX
from lifting_diary.models.exercise import Exercise
from lifting_diary.models.workout import Workout
from lifting_diary.models.workout_exercise import WorkoutExercise
from lifting_diary.models.workout_set import WEIGHT_UNITS, WorkoutSet
from lifting_diary.schemas.workout import (
    SetResponse,
    WorkoutDetail,
    WorkoutExerciseCreate,
    WorkoutExerciseDetail,
    WorkoutResponse,
)
from lifting_diary.services.audit import log_action
from lifting_diary.services.exercises import visible_to

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59, 999000)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Inclusive [00:00:00.000, 23:59:59.999] window for a calendar day."""
    return datetime.combine(day, time.min), datetime.combine(day, END_OF_DAY)


def _validate_submission(title: str | None, exercises: Sequence[WorkoutExerciseCreate]) -> str:
    """Check the whole submission up front; return the trimmed title."""
    clean_title = (title or "").strip()
    if not clean_title:
        raise WorkoutValidationError("Workout title is required.")
    if not exercises:
        raise WorkoutValidationError("Add at least one exercise.")
    for i, entry in enumerate(exercises, start=1):
        if not 1 <= entry.exercise_id <= INT32_MAX:
            raise WorkoutValidationError(f"Exercise #{i}: unknown exercise id {entry.exercise_id}.")
        if not entry.sets:
            raise WorkoutValidationError(f"Exercise #{i} has no sets.")
        for j, s in enumerate(entry.sets, start=1):
            if s.reps is None or s.reps < 1:
                raise WorkoutValidationError(f"Exercise #{i}, set #{j}: reps must be at least 1.")
            if s.reps > INT32_MAX:
                raise WorkoutValidationError(f"Exercise #{i}, set #{j}: reps is too large.")
            if s.weight is not None and s.weight < 0:
                raise WorkoutValidationError(f"Exercise #{i}, set #{j}: weight cannot be negative.")
            if s.weight_unit not in WEIGHT_UNITS:
                raise WorkoutValidationError(f"Exercise #{i}, set #{j}: unknown weight unit {s.weight_unit!r}.")
    return clean_title


async def _ensure_exercises_visible(session: AsyncSession, user_id: str, exercise_ids: set[int]) -> None:
    r = await session.execute(select(Exercise.id).where(Exercise.id.in_(exercise_ids), visible_to(user_id)))
    found = set(r.scalars().all())
    missing = sorted(exercise_ids - found)
    if missing:
        raise WorkoutValidationError(f"Unknown exercise id(s): {', '.join(str(m) for m in missing)}.")


async def create_workout(
    session: AsyncSession,
    user_id: str | None,
    title: str | None,
    workout_date: date,
    exercises: Sequence[WorkoutExerciseCreate],
) -> Workout:
    """
    Record a completed session: one workout row, one workout-exercise row per
    entry (order = 1..n in submission order) and one set row per set
    (set_number = 1..m). All rows are written in a single transaction; on any
    failure nothing is kept and the error propagates.
    """
    uid = require_user(user_id)
    clean_title = _validate_submission(title, exercises)
    await _ensure_exercises_visible(session, uid, {e.exercise_id for e in exercises})

    now = datetime.now()
    try:
        workout = Workout(
            user_id=uid,
            workout_date=datetime.combine(workout_date, time.min),
            title=clean_title,
            started_at=now,
            completed_at=now,
        )
        session.add(workout)
        await session.flush()
        for i, entry in enumerate(exercises):
            we = WorkoutExercise(workout_id=workout.id, exercise_id=entry.exercise_id, order=i + 1)
            session.add(we)
            await session.flush()
            for j, s in enumerate(entry.sets):
                session.add(
                    WorkoutSet(
                        workout_exercise_id=we.id,
                        set_number=j + 1,
                        reps=s.reps,
                        weight=s.weight,
                        weight_unit=s.weight_unit,
                        completed=True,
                    )
                )
        await session.flush()
        await log_action(
            session,
            user_id=uid,
            action="create",
            resource="workout",
            resource_id=str(workout.id),
            details={"exercises": len(exercises), "sets": sum(len(e.sets) for e in exercises)},
        )
        await session.commit()
    except Exception:
        await session.rollback()
        logger.exception("Workout create failed for user %s; transaction rolled back", uid)
        raise
    logger.info("Workout %s created for user %s (%d exercises)", workout.id, uid, len(exercises))
    return workout


async def get_workouts_by_date(session: AsyncSession, user_id: str | None, day: date) -> list[Workout]:
    """Workouts of the user dated on the given day, most recently started first. No children."""
    uid = require_user(user_id)
    start, end = day_bounds(day)
    r = await session.execute(
        select(Workout)
        .where(
            Workout.user_id == uid,
            Workout.workout_date >= start,
            Workout.workout_date <= end,
        )
        .order_by(Workout.started_at.desc())
    )
    return list(r.scalars().all())


async def get_workout_by_id(session: AsyncSession, user_id: str | None, workout_id: int) -> WorkoutDetail | None:
    """
    Workout with its exercises and sets, or None when it does not exist or is
    owned by someone else. Queries: the workout (owner-filtered), the exercise
    join, then the sets of each exercise.
    """
    uid = require_user(user_id)
    if not 1 <= workout_id <= INT32_MAX:
        return None
    r = await session.execute(
        select(Workout).where(Workout.id == workout_id, Workout.user_id == uid).limit(1)
    )
    workout = r.scalar_one_or_none()
    if workout is None:
        return None

    rows = await session.execute(
        select(
            WorkoutExercise.id.label("workout_exercise_id"),
            WorkoutExercise.order,
            Exercise.id.label("exercise_id"),
            Exercise.name.label("exercise_name"),
            Exercise.video_url,
        )
        .join(Exercise, WorkoutExercise.exercise_id == Exercise.id)
        .where(WorkoutExercise.workout_id == workout.id)
        .order_by(WorkoutExercise.order)
    )
    exercises: list[WorkoutExerciseDetail] = []
    for row in rows.all():
        sr = await session.execute(
            select(WorkoutSet)
            .where(WorkoutSet.workout_exercise_id == row.workout_exercise_id)
            .order_by(WorkoutSet.set_number)
        )
        exercises.append(
            WorkoutExerciseDetail(
                workout_exercise_id=row.workout_exercise_id,
                order=row.order,
                exercise_id=row.exercise_id,
                exercise_name=row.exercise_name,
                video_url=row.video_url,
                sets=[SetResponse.model_validate(s) for s in sr.scalars().all()],
            )
        )
    return WorkoutDetail(**WorkoutResponse.model_validate(workout).model_dump(), exercises=exercises)


async def get_recent_workouts(session: AsyncSession, user_id: str | None, limit: int | None = None) -> list[Workout]:
    """Most recently dated workouts of the user (10 by default)."""
    uid = require_user(user_id)
    r = await session.execute(
        select(Workout)
        .where(Workout.user_id == uid)
        .order_by(Workout.workout_date.desc())
        .limit(settings.recent_workouts_limit if limit is None else limit)
    )
    return list(r.scalars().all())
