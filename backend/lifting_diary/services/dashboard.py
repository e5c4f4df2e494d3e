"""Dashboard read model: summaries of the user's workouts on one date."""

import logging
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from lifting_diary.schemas.dashboard import DashboardResponse, ExerciseSummary, WorkoutSummary
from lifting_diary.schemas.workout import WorkoutDetail, WorkoutExerciseDetail
from lifting_diary.services.workouts import get_workout_by_id, get_workouts_by_date

logger = logging.getLogger(__name__)

UNTITLED_WORKOUT = "Untitled Workout"
DEFAULT_WEIGHT_UNIT = "kg"


def _round_half_up(value: Decimal | float, places: str = "1") -> Decimal:
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def duration_minutes(started_at: datetime | None, completed_at: datetime | None) -> int | None:
    """Whole minutes between start and completion; None unless both are set and the result is non-zero."""
    if started_at is None or completed_at is None:
        return None
    minutes = int(_round_half_up((completed_at - started_at).total_seconds() / 60))
    return minutes or None


def summarize_exercise(exercise: WorkoutExerciseDetail) -> ExerciseSummary:
    """
    Set count, mean reps and mean weight for one exercise.

    The weight mean divides the sum of recorded weights by the total number of
    sets, so bodyweight sets (weight=None) pull it down.
    """
    total_sets = len(exercise.sets)
    avg_reps = 0
    avg_weight = Decimal(0)
    if total_sets:
        avg_reps = int(_round_half_up(Decimal(sum(s.reps for s in exercise.sets)) / total_sets))
        weight_sum = sum((s.weight for s in exercise.sets if s.weight is not None), Decimal(0))
        avg_weight = _round_half_up(weight_sum / total_sets, "0.1")
    unit = exercise.sets[0].weight_unit if exercise.sets and exercise.sets[0].weight_unit else DEFAULT_WEIGHT_UNIT
    return ExerciseSummary(
        workout_exercise_id=exercise.workout_exercise_id,
        exercise_name=exercise.exercise_name,
        set_count=total_sets,
        avg_reps=avg_reps,
        avg_weight=float(avg_weight) if avg_weight > 0 else None,
        weight_unit=unit,
    )


def summarize_workout(workout: WorkoutDetail) -> WorkoutSummary:
    return WorkoutSummary(
        id=workout.id,
        title=workout.title or UNTITLED_WORKOUT,
        start_time=workout.started_at.strftime("%H:%M") if workout.started_at else "N/A",
        duration_minutes=duration_minutes(workout.started_at, workout.completed_at),
        exercises=[summarize_exercise(e) for e in workout.exercises],
    )


async def get_dashboard(session: AsyncSession, user_id: str | None, day: date) -> DashboardResponse:
    """Workouts dated on `day` (most recently started first) with per-exercise summaries."""
    workouts = await get_workouts_by_date(session, user_id, day)
    summaries: list[WorkoutSummary] = []
    for w in workouts:
        detail = await get_workout_by_id(session, user_id, w.id)
        if detail is None:
            continue
        summaries.append(summarize_workout(detail))
    logger.debug("Dashboard for %s on %s: %d workouts", user_id, day.isoformat(), len(summaries))
    return DashboardResponse(date=day, workouts=summaries)
