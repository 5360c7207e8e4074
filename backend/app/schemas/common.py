"""Shared building blocks for request/response schemas.

Wire names are camelCase (classId, createdAt); request bodies also accept the
snake_case field names. Request bodies reject unknown fields.
"""
from datetime import date, datetime, time
from typing import Annotated, ClassVar, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from app.core.time_utils import hhmm_to_time, parse_iso_date, time_to_hhmm


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


# Required text: stripped, at least one character left
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Optional free text: blank strings are stored as null
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]

# 'YYYY-MM-DD' or a full ISO datetime (date part kept)
IsoDate = Annotated[date, BeforeValidator(parse_iso_date)]

# 'HH:MM', 'HH:MM:SS', '7:30 PM' ... or blank
OptionalTime = Annotated[Optional[time], BeforeValidator(hhmm_to_time)]

# time column -> 'HH:MM' on the way out
HhMm = Annotated[Optional[str], BeforeValidator(time_to_hhmm)]


class RequestModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PatchModel(RequestModel):
    """Partial update: only fields present in the body are applied."""

    # fields that may be omitted but never set to null
    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _no_null_required(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ReadModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class EntityRead(ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime


class OkResponse(BaseModel):
    ok: bool = True
