from datetime import date
from typing import Optional

from app.core.constants import DEFAULT_BIKE_EVENT_TYPE
from app.schemas.common import (
    EntityRead,
    IsoDate,
    NonEmptyStr,
    OptionalText,
    PatchModel,
    RequestModel,
)


class BikeIdeaCreate(RequestModel):
    content: NonEmptyStr


class BikeIdeaUpdate(PatchModel):
    required_fields = ("content",)

    content: Optional[NonEmptyStr] = None


class BikeIdeaRead(EntityRead):
    content: str


class BikeEventCreate(RequestModel):
    title: NonEmptyStr
    date: IsoDate
    description: OptionalText = None
    type: NonEmptyStr = DEFAULT_BIKE_EVENT_TYPE


class BikeEventUpdate(PatchModel):
    required_fields = ("title", "date", "type")

    title: Optional[NonEmptyStr] = None
    date: Optional[IsoDate] = None
    description: OptionalText = None
    type: Optional[NonEmptyStr] = None


class BikeEventRead(EntityRead):
    title: str
    date: date
    description: Optional[str] = None
    type: str
