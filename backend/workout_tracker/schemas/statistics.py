from workout_tracker.schemas.base import CamelModel
from workout_tracker.services.statistics import Overview

class StatisticsRead(CamelModel):
    total_workouts: int
    total_duration_seconds: int
    avg_duration_seconds: int
    total_sets: int
    total_reps: int
    avg_reps_per_set: int

    @classmethod
    def from_overview(cls, o: Overview) -> "StatisticsRead":
        return cls(
            total_workouts=o.total_workouts,
            total_duration_seconds=int(o.total_duration.total_seconds()),
            avg_duration_seconds=int(o.avg_duration.total_seconds()),
            total_sets=o.total_sets,
            total_reps=o.total_reps,
            avg_reps_per_set=o.avg_reps_per_set,
        )
