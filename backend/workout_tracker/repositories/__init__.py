from workout_tracker.repositories.exercise_repo import ExerciseRepository
from workout_tracker.repositories.workout_repo import WorkoutRepository
from workout_tracker.repositories.set_repo import SetRepository

__all__ = ["ExerciseRepository", "WorkoutRepository", "SetRepository"]
