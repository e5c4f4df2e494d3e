"""Pydantic schemas for the dashboard (per-date workout summaries)."""

from datetime import date

from pydantic import BaseModel


class ExerciseSummary(BaseModel):
    workout_exercise_id: int
    exercise_name: str
    set_count: int
    avg_reps: int
    avg_weight: float | None  # None when there is nothing to show (bodyweight only)
    weight_unit: str


class WorkoutSummary(BaseModel):
    id: int
    title: str
    start_time: str  # HH:MM or "N/A"
    duration_minutes: int | None
    exercises: list[ExerciseSummary]


class DashboardResponse(BaseModel):
    date: date
    workouts: list[WorkoutSummary]
