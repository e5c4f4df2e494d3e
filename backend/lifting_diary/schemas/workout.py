"""Pydantic schemas for the workout aggregate (create body and read shapes)."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lifting_diary.db.base import INT32_MAX


class SetCreate(BaseModel):
    """One set in a workout submission. Empty weight means bodyweight."""

    reps: int = Field(..., ge=1, le=INT32_MAX)
    weight: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    weight_unit: Literal["lbs", "kg"] = "lbs"

    @field_validator("weight", mode="before")
    @classmethod
    def _blank_weight_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class WorkoutExerciseCreate(BaseModel):
    exercise_id: int = Field(..., ge=1, le=INT32_MAX)
    sets: list[SetCreate] = Field(..., min_length=1)


class WorkoutCreate(BaseModel):
    """Body for logging a workout: the whole aggregate in one submission."""

    title: str = Field(..., max_length=255)
    workout_date: date
    exercises: list[WorkoutExerciseCreate] = Field(..., min_length=1)


class SetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    set_number: int
    reps: int
    weight: Decimal | None
    weight_unit: str | None
    completed: bool


class WorkoutExerciseDetail(BaseModel):
    """Exercise at a position in a workout, joined with its catalog entry, with its sets."""

    workout_exercise_id: int
    order: int
    exercise_id: int
    exercise_name: str
    video_url: str | None
    sets: list[SetResponse]


class WorkoutResponse(BaseModel):
    """Workout row without children."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    workout_date: datetime
    title: str | None
    started_at: datetime | None
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime


class WorkoutDetail(WorkoutResponse):
    """Workout with exercises ordered by position and sets ordered by set number."""

    exercises: list[WorkoutExerciseDetail]
