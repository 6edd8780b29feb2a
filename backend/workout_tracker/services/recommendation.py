"""Next-set recommendation.

Pre-fills the inputs of a new set from recent history so that resuming an
exercise does not require re-entering known values. This is an ordered
fallback, not a model; the first step that finds a set wins:

1. latest set of the requested exercise in the same workout
2. latest set of the workout, any exercise
3. first set of the most recent (highest id) workout that has sets
4. a neutral default with ``NO_EXERCISE`` as exercise id
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from workout_tracker.models import ExerciseSet

log = logging.getLogger(__name__)

# Reserved exercise id meaning "nothing pre-selected"; real ids start at 1.
NO_EXERCISE = -1


@dataclass(slots=True, frozen=True)
class Recommendation:
    exercise_id: int
    repetitions: int
    weight: float

    @classmethod
    def from_set(cls, s: ExerciseSet) -> Recommendation:
        return cls(exercise_id=s.exercise_id, repetitions=s.repetitions, weight=s.weight)


DEFAULT_RECOMMENDATION = Recommendation(exercise_id=NO_EXERCISE, repetitions=0, weight=0)


class RecommendationService:
    def __init__(self, db: Session):
        self.db = db

    def recommend(self, workout_id: int, exercise_id: int | None = None) -> Recommendation:
        if exercise_id is not None:
            found = self._latest_in_workout(workout_id, exercise_id)
            if found is not None:
                return Recommendation.from_set(found)

        found = self._latest_in_workout(workout_id)
        if found is not None:
            return Recommendation.from_set(found)

        found = self._first_of_last_workout()
        if found is not None:
            return Recommendation.from_set(found)

        log.debug("no sets recorded yet, recommending defaults")
        return DEFAULT_RECOMMENDATION

    def _latest_in_workout(self, workout_id: int, exercise_id: int | None = None) -> ExerciseSet | None:
        stmt = select(ExerciseSet).where(ExerciseSet.workout_id == workout_id)
        if exercise_id is not None:
            stmt = stmt.where(ExerciseSet.exercise_id == exercise_id)
        stmt = stmt.order_by(ExerciseSet.created_at.desc(), ExerciseSet.id.desc()).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()

    def _first_of_last_workout(self) -> ExerciseSet | None:
        last_workout = select(func.max(ExerciseSet.workout_id)).scalar_subquery()
        stmt = (
            select(ExerciseSet)
            .where(ExerciseSet.workout_id == last_workout)
            .order_by(ExerciseSet.created_at.asc(), ExerciseSet.id.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()
