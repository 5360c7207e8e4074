"""Entity store: one SQLAlchemy table per entity kind behind a uniform API.

A store wraps a single request-scoped Session. Every write commits exactly
once; on any database error the session is rolled back and StorageFailure is
raised, so a failed operation never leaves partial rows behind.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFound, StorageFailure
from app.models.bike import BikeEvent, BikeIdea
from app.models.event import Event
from app.models.idea import Idea
from app.models.school import ImportantDate, SchoolClass, WorkItem
from app.models.workout import Workout


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kind:
    name: str
    label: str
    model: Any
    # default list order; creation order then id break ties
    order_by: Callable[[Any], tuple]
    eager: tuple = ()


def _newest_first(m):
    return (m.created_at.desc(), m.id.asc())


def _by_date_asc(m):
    return (m.date.asc(), m.created_at.asc(), m.id.asc())


def _by_date_desc(m):
    return (m.date.desc(), m.created_at.asc(), m.id.asc())


CLASSES = Kind("classes", "Class", SchoolClass, _newest_first)
WORK_ITEMS = Kind("work_items", "Work item", WorkItem, _newest_first)
IMPORTANT_DATES = Kind("important_dates", "Important date", ImportantDate, _by_date_asc)
IDEAS = Kind("ideas", "Idea", Idea, _newest_first)
EVENTS = Kind("events", "Event", Event, _by_date_asc)
WORKOUTS = Kind("workouts", "Workout", Workout, _by_date_desc, eager=("exercises",))
BIKE_IDEAS = Kind("bike_ideas", "Bike idea", BikeIdea, _newest_first)
BIKE_EVENTS = Kind("bike_events", "Bike event", BikeEvent, _by_date_asc)


class EntityStore:
    def __init__(self, db: Session):
        self.db = db

    def _query(self, kind: Kind):
        query = self.db.query(kind.model)
        for rel in kind.eager:
            query = query.options(selectinload(getattr(kind.model, rel)))
        return query

    def list(self, kind: Kind) -> list:
        try:
            return self._query(kind).order_by(*kind.order_by(kind.model)).all()
        except SQLAlchemyError as e:
            raise self._fail(f"listing {kind.name}", e)

    def find(self, kind: Kind, entity_id: str):
        """Like get(), but None instead of NotFound."""
        try:
            return self._query(kind).filter(kind.model.id == entity_id).first()
        except SQLAlchemyError as e:
            raise self._fail(f"loading {kind.name}", e)

    def get(self, kind: Kind, entity_id: str):
        row = self.find(kind, entity_id)
        if row is None:
            raise NotFound(kind.label, entity_id)
        return row

    def insert(self, kind: Kind, entity):
        self.db.add(entity)
        self._commit(f"inserting into {kind.name}", refresh=entity)
        return entity

    def update(self, kind: Kind, entity_id: str, patch: dict):
        row = self.get(kind, entity_id)
        for key, value in patch.items():
            setattr(row, key, value)
        self._commit(f"updating {kind.name}", refresh=row)
        return row

    def delete(self, kind: Kind, entity_id: str) -> None:
        row = self.get(kind, entity_id)
        # relationship cascades delete owned children in the same flush
        self.db.delete(row)
        self._commit(f"deleting from {kind.name}")

    def _commit(self, what: str, refresh=None) -> None:
        try:
            self.db.commit()
            if refresh is not None:
                self.db.refresh(refresh)
        except SQLAlchemyError as e:
            raise self._fail(what, e)

    def _fail(self, what: str, e: Exception) -> StorageFailure:
        self.db.rollback()
        log.exception("storage failure while %s", what)
        return StorageFailure(f"Storage failure while {what}: {e.__class__.__name__}")
