from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Text
from workout_tracker.db import Base
from workout_tracker.models.types import UTCDateTime, utcnow

class Workout(Base):
    __tablename__ = "workout"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    started_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, default=utcnow)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    sets = relationship("ExerciseSet", back_populates="workout", passive_deletes=True)
