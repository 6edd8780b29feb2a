from workout_tracker.models import Workout
from workout_tracker.schemas.base import CamelModel

class WorkoutRead(CamelModel):
    id: int
    start_seconds_unix_epoch: int

    @classmethod
    def from_entity(cls, w: Workout) -> "WorkoutRead":
        return cls(id=w.id, start_seconds_unix_epoch=int(w.started_at.timestamp()))

class WorkoutCreated(CamelModel):
    id: int
