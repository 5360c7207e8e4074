import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.types import TypeDecorator

from app.core.time_utils import as_utc


def new_id() -> str:
    return str(uuid.uuid4())


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetime on every backend.

    Postgres keeps the offset itself; SQLite stores naive values, so they are
    tagged as UTC again on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class EntityMixin:
    """String id plus created/updated timestamps shared by every top-level kind.

    Values are assigned by the resource service, never by the database or the
    client, so created_at == updated_at right after create.
    """

    id = Column(String(36), primary_key=True, index=True, default=new_id)

    created_at = Column(UTCDateTime(), nullable=False)
    updated_at = Column(UTCDateTime(), nullable=False)
