from typing import Annotated
from pydantic import Field, field_validator
from workout_tracker.schemas.base import CamelModel

NameStr = Annotated[str, Field(max_length=120)]

class ExerciseName(CamelModel):
    """Body of create, update and exists requests."""
    name: NameStr

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("name cannot be blank")
        return v2

class ExerciseRead(CamelModel):
    id: int
    name: str

    model_config = {"from_attributes": True}

class ExerciseCount(CamelModel):
    count: int

class ExerciseExists(CamelModel):
    exists: bool
