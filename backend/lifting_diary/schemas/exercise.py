"""Pydantic schemas for the exercise catalog."""

from pydantic import BaseModel, ConfigDict


class ExerciseResponse(BaseModel):
    """Exercise as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    video_url: str | None
    is_custom: bool
    user_id: str | None
