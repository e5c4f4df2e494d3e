#!/usr/bin/env python3
"""Seed the exercise library and sample workouts for one user.
Usage: SEED_USER_ID=user_123 python scripts/seed.py"""
import asyncio
import os
from datetime import datetime, timedelta
from decimal import Decimal

from lifting_diary.db.session import async_session_maker, init_db
from lifting_diary.models import Exercise, Workout, WorkoutExercise, WorkoutSet

USER_ID = os.environ.get("SEED_USER_ID", "")

GLOBAL_EXERCISES = [
    ("Barbell Bench Press", "https://www.youtube.com/watch?v=rT7DgCr-3pg"),
    ("Barbell Squat", "https://www.youtube.com/watch?v=ultWZbUMPL8"),
    ("Barbell Deadlift", "https://www.youtube.com/watch?v=op9kVnSso6Q"),
    ("Overhead Press", "https://www.youtube.com/watch?v=2yjwXTZQDDI"),
    ("Barbell Row", "https://www.youtube.com/watch?v=9efgcAjQe7E"),
    ("Pull-ups", "https://www.youtube.com/watch?v=eGo4IYlbE5g"),
    ("Dumbbell Lateral Raise", "https://www.youtube.com/watch?v=3VcKaXpzqRo"),
    ("Leg Press", "https://www.youtube.com/watch?v=IZxyjW7MPJQ"),
    ("Romanian Deadlift", "https://www.youtube.com/watch?v=2SHsk9AzdjA"),
    ("Incline Dumbbell Press", "https://www.youtube.com/watch?v=8iPEnn-ltC8"),
]
CUSTOM_EXERCISE = "Cable Tricep Pushdown"

# (title, days ago, duration in minutes or None for in progress, [(exercise, [(reps, weight), ...]), ...])
SAMPLE_WORKOUTS = [
    ("Push Day", 5, 60, [
        ("Barbell Bench Press", [(8, "135"), (8, "185"), (6, "205"), (5, "225")]),
        ("Overhead Press", [(10, "65"), (8, "85"), (6, "95")]),
        ("Incline Dumbbell Press", [(12, "50"), (10, "60"), (8, "70")]),
    ]),
    ("Pull Day", 3, 55, [
        ("Barbell Deadlift", [(5, "225"), (5, "275"), (3, "315")]),
        ("Barbell Row", [(10, "135"), (8, "155"), (8, "165")]),
        ("Pull-ups", [(10, "0"), (8, "0"), (6, "0"), (5, "0")]),
    ]),
    ("Leg Day", 1, 70, [
        ("Barbell Squat", [(10, "135"), (8, "185"), (6, "225"), (5, "245")]),
        ("Romanian Deadlift", [(12, "135"), (10, "155"), (10, "175")]),
        ("Leg Press", [(15, "180"), (12, "270"), (10, "360")]),
    ]),
    ("Upper Body", 0, None, [
        ("Barbell Bench Press", [(10, "135"), (8, "155")]),
        (CUSTOM_EXERCISE, [(12, "40")]),
    ]),
]


async def main():
    if not USER_ID:
        print("Set SEED_USER_ID (the identity provider user id) in environment")
        return
    await init_db()
    print("Seeding database...\n")
    async with async_session_maker() as session:
        exercises = [Exercise(name=name, video_url=url, is_custom=False, user_id=None) for name, url in GLOBAL_EXERCISES]
        exercises.append(Exercise(name=CUSTOM_EXERCISE, video_url=None, is_custom=True, user_id=USER_ID))
        session.add_all(exercises)
        await session.flush()
        by_name = {e.name: e for e in exercises}
        print(f"Created {len(exercises)} exercises\n")

        now = datetime.now()
        for title, days_ago, minutes, entries in SAMPLE_WORKOUTS:
            day = now - timedelta(days=days_ago)
            if minutes is None:
                started, completed = now - timedelta(minutes=30), None
            else:
                started, completed = day, day + timedelta(minutes=minutes)
            workout = Workout(user_id=USER_ID, workout_date=day, title=title, started_at=started, completed_at=completed)
            session.add(workout)
            await session.flush()
            for order, (exercise_name, sets) in enumerate(entries, start=1):
                we = WorkoutExercise(workout_id=workout.id, exercise_id=by_name[exercise_name].id, order=order)
                session.add(we)
                await session.flush()
                session.add_all(
                    WorkoutSet(
                        workout_exercise_id=we.id,
                        set_number=n,
                        reps=reps,
                        weight=Decimal(weight),
                        weight_unit="lbs",
                        completed=True,
                    )
                    for n, (reps, weight) in enumerate(sets, start=1)
                )
            print(f"Created workout: {title}")
        await session.commit()
    print("\nSeed complete.")


if __name__ == "__main__":
    asyncio.run(main())
