from datetime import date
from typing import Optional

from app.schemas.common import (
    EntityRead,
    IsoDate,
    NonEmptyStr,
    OptionalText,
    PatchModel,
    ReadModel,
    RequestModel,
)


class ClassCreate(RequestModel):
    name: NonEmptyStr


class ClassUpdate(PatchModel):
    required_fields = ("name",)

    name: Optional[NonEmptyStr] = None


class ClassRead(EntityRead):
    name: str


class WorkItemCreate(RequestModel):
    title: NonEmptyStr
    description: OptionalText = None
    completed: bool = False
    class_id: NonEmptyStr


class WorkItemUpdate(PatchModel):
    required_fields = ("title", "completed", "class_id")

    title: Optional[NonEmptyStr] = None
    description: OptionalText = None
    completed: Optional[bool] = None
    class_id: Optional[NonEmptyStr] = None


class WorkItemRead(EntityRead):
    title: str
    description: Optional[str] = None
    completed: bool
    class_id: str


class WorkItemPartition(ReadModel):
    """A class's work items split by status; both lists keep list order."""

    pending: list[WorkItemRead]
    completed: list[WorkItemRead]


class ImportantDateCreate(RequestModel):
    title: NonEmptyStr
    date: IsoDate
    description: OptionalText = None
    class_id: NonEmptyStr


class ImportantDateUpdate(PatchModel):
    required_fields = ("title", "date", "class_id")

    title: Optional[NonEmptyStr] = None
    date: Optional[IsoDate] = None
    description: OptionalText = None
    class_id: Optional[NonEmptyStr] = None


class ImportantDateRead(EntityRead):
    title: str
    date: date
    description: Optional[str] = None
    class_id: str
