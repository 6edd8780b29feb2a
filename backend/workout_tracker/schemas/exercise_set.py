from typing import Annotated
from pydantic import Field
from workout_tracker.models import ExerciseSet
from workout_tracker.schemas.base import CamelModel

INT64_MAX = 2**63 - 1

PosInt = Annotated[int, Field(ge=1, le=INT64_MAX)]
NonNegFloat = Annotated[float, Field(ge=0, le=10_000, allow_inf_nan=False)]
NoteStr = Annotated[str, Field(max_length=2000)]

class SetWrite(CamelModel):
    """Payload for creating and updating a set."""
    exercise_id: Annotated[int, Field(ge=1, le=INT64_MAX)]
    repetitions: PosInt
    weight: NonNegFloat
    note: NoteStr | None = None

class SetRead(CamelModel):
    id: int
    exercise_id: int
    exercise_name: str
    done_seconds_unix_epoch: int
    repetitions: int
    weight: float
    note: str | None = None

    @classmethod
    def from_entity(cls, s: ExerciseSet) -> "SetRead":
        return cls(
            id=s.id,
            exercise_id=s.exercise_id,
            exercise_name=s.exercise.name,
            done_seconds_unix_epoch=int(s.created_at.timestamp()),
            repetitions=s.repetitions,
            weight=s.weight,
            note=s.note,
        )

class SetRecommendationRead(CamelModel):
    exercise_id: int
    repetitions: int
    weight: float
