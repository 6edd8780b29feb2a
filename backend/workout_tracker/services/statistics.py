from __future__ import annotations
from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from workout_tracker.models import ExerciseSet, Workout


@dataclass(slots=True, frozen=True)
class Overview:
    total_workouts: int = 0
    total_duration: timedelta = timedelta(0)
    avg_duration: timedelta = timedelta(0)
    total_sets: int = 0
    total_reps: int = 0
    avg_reps_per_set: int = 0


class StatisticsService:
    """Summary metrics over the whole workout history.

    A workout's duration runs from its start to its latest set, so only
    workouts with at least one set are counted; empty sessions have no
    duration and are left out of ``total_workouts`` as well.

    The two queries are independent reads and may see slightly different
    snapshots of the store.
    """

    def __init__(self, db: Session):
        self.db = db

    def overview(self) -> Overview:
        durations = self._workout_durations()
        total_duration = sum(durations, timedelta(0))
        total_workouts = len(durations)
        avg_duration = (
            timedelta(seconds=int(total_duration.total_seconds()) // total_workouts)
            if total_workouts
            else timedelta(0)
        )

        total_sets, total_reps = self._set_totals()
        return Overview(
            total_workouts=total_workouts,
            total_duration=total_duration,
            avg_duration=avg_duration,
            total_sets=total_sets,
            total_reps=total_reps,
            avg_reps_per_set=total_reps // total_sets if total_sets else 0,
        )

    def _workout_durations(self) -> list[timedelta]:
        stmt = (
            select(Workout.started_at, func.max(ExerciseSet.created_at))
            .join(ExerciseSet, ExerciseSet.workout_id == Workout.id)
            .group_by(Workout.id, Workout.started_at)
        )
        # each endpoint counts in whole epoch seconds
        return [
            timedelta(seconds=int(last.timestamp()) - int(started.timestamp()))
            for started, last in self.db.execute(stmt).all()
        ]

    def _set_totals(self) -> tuple[int, int]:
        stmt = select(func.count(ExerciseSet.id), func.coalesce(func.sum(ExerciseSet.repetitions), 0))
        total_sets, total_reps = self.db.execute(stmt).one()
        return int(total_sets), int(total_reps)
