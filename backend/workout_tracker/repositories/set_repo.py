from __future__ import annotations
from datetime import datetime
from sqlalchemy import select, delete
from sqlalchemy.orm import joinedload

from workout_tracker.errors import NotFoundError, UnknownExerciseError
from workout_tracker.models import Exercise, ExerciseSet
from workout_tracker.models.types import utcnow
from workout_tracker.repositories.base import BaseRepository


def clean_note(note: str | None) -> str | None:
    """Blank notes are stored as NULL so "has a note" stays a plain check."""
    if note is None:
        return None
    note = note.strip()
    return note or None


class SetRepository(BaseRepository[ExerciseSet]):
    model = ExerciseSet

    def find_by_id(self, set_id: int) -> ExerciseSet:
        stmt = (
            select(ExerciseSet)
            .options(joinedload(ExerciseSet.exercise))
            .where(ExerciseSet.id == set_id)
        )
        found = self.db.execute(stmt).scalar_one_or_none()
        if found is None:
            raise NotFoundError(f"set {set_id}")
        return found

    def find_by_workout_id(self, workout_id: int) -> list[ExerciseSet]:
        stmt = (
            select(ExerciseSet)
            .options(joinedload(ExerciseSet.exercise))
            .where(ExerciseSet.workout_id == workout_id)
            .order_by(ExerciseSet.created_at.desc(), ExerciseSet.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        workout_id: int,
        *,
        exercise_id: int,
        repetitions: int,
        weight: float,
        note: str | None = None,
        created_at: datetime | None = None,
    ) -> ExerciseSet:
        self._require_exercise(exercise_id)
        s = ExerciseSet(
            workout_id=workout_id,
            exercise_id=exercise_id,
            repetitions=repetitions,
            weight=weight,
            note=clean_note(note),
            created_at=created_at or utcnow(),
        )
        return self.add_and_refresh(s)

    def update(
        self,
        set_id: int,
        *,
        exercise_id: int,
        repetitions: int,
        weight: float,
        note: str | None = None,
    ) -> ExerciseSet:
        s = self.db.get(ExerciseSet, set_id)
        if s is None:
            raise NotFoundError(f"set {set_id}")
        self._require_exercise(exercise_id)
        s.exercise_id = exercise_id
        s.repetitions = repetitions
        s.weight = weight
        s.note = clean_note(note)
        self.commit()
        self.db.refresh(s)
        return s

    def delete(self, set_id: int) -> None:
        self.db.execute(delete(ExerciseSet).where(ExerciseSet.id == set_id))
        self.commit()

    def _require_exercise(self, exercise_id: int) -> None:
        if self.db.get(Exercise, exercise_id) is None:
            raise UnknownExerciseError(f"exercise {exercise_id}")
