from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Index, func
from workout_tracker.db import Base

class Exercise(Base):
    __tablename__ = "exercise"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    # no delete cascade: an exercise in use must not disappear under its sets
    sets = relationship("ExerciseSet", back_populates="exercise")

# Names are compared case-insensitively; enforce it in the store too.
Index("ix_exercise_name_lower", func.lower(Exercise.name), unique=True)
