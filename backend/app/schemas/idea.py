from typing import Optional

from app.schemas.common import EntityRead, NonEmptyStr, PatchModel, RequestModel


class IdeaCreate(RequestModel):
    content: NonEmptyStr


class IdeaUpdate(PatchModel):
    required_fields = ("content",)

    content: Optional[NonEmptyStr] = None


class IdeaRead(EntityRead):
    content: str
