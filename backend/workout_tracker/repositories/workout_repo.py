from __future__ import annotations
from datetime import datetime
from sqlalchemy import select, delete

from workout_tracker.errors import NotFoundError
from workout_tracker.models import Workout
from workout_tracker.models.types import utcnow
from workout_tracker.repositories.base import BaseRepository


class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def find_all(self) -> list[Workout]:
        stmt = select(Workout).order_by(Workout.started_at.desc(), Workout.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, *, started_at: datetime | None = None) -> int:
        workout = self.add_and_refresh(Workout(started_at=started_at or utcnow()))
        return workout.id

    def delete(self, workout_id: int) -> None:
        # sets go with it through ON DELETE CASCADE
        result = self.db.execute(delete(Workout).where(Workout.id == workout_id))
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"workout {workout_id}")
        self.commit()
