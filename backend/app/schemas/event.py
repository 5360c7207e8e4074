from datetime import date
from typing import Optional

from app.schemas.common import (
    EntityRead,
    HhMm,
    IsoDate,
    NonEmptyStr,
    OptionalText,
    OptionalTime,
    PatchModel,
    RequestModel,
)


class EventCreate(RequestModel):
    title: NonEmptyStr
    date: IsoDate
    time: OptionalTime = None
    description: OptionalText = None


class EventUpdate(PatchModel):
    required_fields = ("title", "date")

    title: Optional[NonEmptyStr] = None
    date: Optional[IsoDate] = None
    time: OptionalTime = None
    description: OptionalText = None


class EventRead(EntityRead):
    title: str
    date: date
    time: HhMm = None  # 'HH:MM'
    description: Optional[str] = None
