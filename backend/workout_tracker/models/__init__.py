from workout_tracker.models.exercise import Exercise
from workout_tracker.models.workout import Workout
from workout_tracker.models.exercise_set import ExerciseSet

__all__ = ["Exercise", "Workout", "ExerciseSet"]
