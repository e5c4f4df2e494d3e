#!/usr/bin/env python3
"""Print counts and a per-workout summary of seeded data.
Usage: SEED_USER_ID=user_123 python scripts/verify_seed.py"""
import asyncio
import os

from sqlalchemy import distinct, func, select

from lifting_diary.db.session import async_session_maker
from lifting_diary.models import Exercise, Workout, WorkoutExercise, WorkoutSet

USER_ID = os.environ.get("SEED_USER_ID", "")


async def main():
    if not USER_ID:
        print("Set SEED_USER_ID in environment")
        return
    print("\nVerifying seeded data...\n")
    async with async_session_maker() as session:
        exercises = (await session.execute(select(func.count()).select_from(Exercise))).scalar() or 0
        print(f"Exercises: {exercises}")
        workouts = (
            await session.execute(select(func.count()).select_from(Workout).where(Workout.user_id == USER_ID))
        ).scalar() or 0
        print(f"Workouts for user: {workouts}")

        r = await session.execute(
            select(
                Workout.title,
                Workout.workout_date,
                Workout.completed_at.is_not(None).label("completed"),
                func.count(distinct(WorkoutExercise.id)).label("exercise_count"),
                func.count(WorkoutSet.id).label("total_sets"),
            )
            .outerjoin(WorkoutExercise, WorkoutExercise.workout_id == Workout.id)
            .outerjoin(WorkoutSet, WorkoutSet.workout_exercise_id == WorkoutExercise.id)
            .where(Workout.user_id == USER_ID)
            .group_by(Workout.id, Workout.title, Workout.workout_date, Workout.completed_at)
            .order_by(Workout.workout_date.desc())
        )
        print("\nWorkout details:")
        for row in r.all():
            status = "Completed" if row.completed else "In progress"
            print(f"  {status} - {row.title} ({row.exercise_count} exercises, {row.total_sets} sets)")
    print("\nVerification complete.\n")


if __name__ == "__main__":
    asyncio.run(main())
