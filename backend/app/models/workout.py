import enum

from sqlalchemy import Column, Date, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.mixins import EntityMixin, new_id


class WorkoutType(str, enum.Enum):
    PUSH = "PUSH"
    PULL = "PULL"
    LEGS = "LEGS"


class Workout(EntityMixin, Base):
    __tablename__ = "workouts"

    type = Column(
        Enum(WorkoutType, name="workout_type", native_enum=False, length=10),
        nullable=False,
    )
    date = Column(Date, nullable=False)
    notes = Column(String, nullable=True)

    exercises = relationship(
        "Exercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="Exercise.position",
    )


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    workout_id = Column(
        String(36), ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # 0-based order as submitted
    position = Column(Integer, nullable=False, default=0)

    name = Column(String, nullable=False)
    sets = Column(Integer, nullable=False, default=1)
    reps = Column(Integer, nullable=False, default=1)
    weight = Column(Float, nullable=False, default=0.0)

    workout = relationship("Workout", back_populates="exercises")
