"""Domain errors raised by the store layer and mapped to HTTP responses in main."""


class LiftingDiaryError(Exception):
    """Base class for store-level errors."""

    pass


class Unauthorized(LiftingDiaryError):
    """Raised when an operation is called without a caller identity."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class WorkoutValidationError(LiftingDiaryError):
    """Raised when a workout submission is rejected before any write begins."""

    pass


def require_user(user_id: str | None) -> str:
    """Return user_id or raise Unauthorized if it is missing/blank."""
    if user_id is None or not str(user_id).strip():
        raise Unauthorized()
    return user_id
