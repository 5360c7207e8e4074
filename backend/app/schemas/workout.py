from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from app.core.constants import DEFAULT_REPS, DEFAULT_SETS, DEFAULT_WEIGHT
from app.models.workout import WorkoutType
from app.schemas.common import (
    EntityRead,
    IsoDate,
    OptionalText,
    PatchModel,
    ReadModel,
    RequestModel,
)


def _is_blank(name) -> bool:
    return name is None or (isinstance(name, str) and not name.strip())


class ExerciseCreate(RequestModel):
    """One exercise row; rows with a blank name are dropped on create."""

    name: str = ""
    sets: int = Field(DEFAULT_SETS, ge=1)
    reps: int = Field(DEFAULT_REPS, ge=1)
    weight: float = Field(DEFAULT_WEIGHT, ge=0)


class WorkoutCreate(RequestModel):
    type: WorkoutType
    date: IsoDate
    notes: OptionalText = None
    exercises: list[ExerciseCreate] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_blank_rows(cls, data):
        # unnamed rows are leftovers from the form; their numbers may be cleared
        if isinstance(data, dict) and isinstance(data.get("exercises"), list):
            data = dict(data)
            data["exercises"] = [
                row
                for row in data["exercises"]
                if not isinstance(row, dict) or not _is_blank(row.get("name"))
            ]
        return data


class WorkoutUpdate(PatchModel):
    """Exercises are fixed at creation; only the workout's own fields change."""

    required_fields = ("type", "date")

    type: Optional[WorkoutType] = None
    date: Optional[IsoDate] = None
    notes: OptionalText = None


class ExerciseRead(ReadModel):
    id: str
    name: str
    sets: int
    reps: int
    weight: float
    workout_id: str


class WorkoutRead(EntityRead):
    type: WorkoutType
    date: date
    notes: Optional[str] = None
    exercises: list[ExerciseRead] = []
