from __future__ import annotations
from sqlalchemy import select, func, delete
from sqlalchemy.exc import IntegrityError

from workout_tracker.errors import ExerciseExistsError, ExerciseInUseError, NotFoundError
from workout_tracker.models import Exercise, ExerciseSet
from workout_tracker.repositories.base import BaseRepository


def normalize_name(name: str) -> str:
    return name.strip()


class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    # READS
    def get(self, exercise_id: int) -> Exercise | None:
        return self.db.get(Exercise, exercise_id)

    def find_all(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def exists_by_name(self, name: str, *, exclude_id: int | None = None) -> bool:
        """Case- and surrounding-whitespace-insensitive name lookup."""
        stmt = select(Exercise.id).where(func.lower(Exercise.name) == func.lower(normalize_name(name)))
        if exclude_id is not None:
            stmt = stmt.where(Exercise.id != exclude_id)
        return self.db.execute(stmt).first() is not None

    def usage_in_sets(self, exercise_id: int) -> int:
        stmt = select(func.count(ExerciseSet.id)).where(ExerciseSet.exercise_id == exercise_id)
        return self.db.execute(stmt).scalar_one()

    # WRITES
    def create(self, name: str) -> Exercise:
        if self.exists_by_name(name):
            raise ExerciseExistsError(name)
        try:
            return self.add_and_refresh(Exercise(name=normalize_name(name)))
        except IntegrityError:
            # lost a race against a concurrent create; the unique index caught it
            raise ExerciseExistsError(name)

    def update(self, exercise_id: int, name: str) -> Exercise:
        exercise = self.get(exercise_id)
        if exercise is None:
            raise NotFoundError(f"exercise {exercise_id}")
        if self.exists_by_name(name, exclude_id=exercise_id):
            raise ExerciseExistsError(name)
        exercise.name = normalize_name(name)
        try:
            self.commit()
        except IntegrityError:
            raise ExerciseExistsError(name)
        self.db.refresh(exercise)
        return exercise

    def delete(self, exercise_id: int) -> None:
        """Remove the exercise; refused while any set still references it."""
        count = self.usage_in_sets(exercise_id)
        if count > 0:
            raise ExerciseInUseError(f"exercise {exercise_id} is used in {count} sets")
        self.db.execute(delete(Exercise).where(Exercise.id == exercise_id))
        self.commit()
