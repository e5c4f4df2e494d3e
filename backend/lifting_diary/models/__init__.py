from lifting_diary.models.audit_log import AuditLog
from lifting_diary.models.exercise import Exercise
from lifting_diary.models.workout import Workout
from lifting_diary.models.workout_exercise import WorkoutExercise
from lifting_diary.models.workout_set import WorkoutSet

__all__ = [
    "AuditLog",
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
