from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.event import EventCreate, EventRead, EventUpdate
from app.services import views
from app.services.resources import ResourceService
from app.services.store import EVENTS


router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventRead])
def list_events(svc: ResourceService = Depends(get_service)):
    return svc.list(EVENTS)


@router.get("/upcoming", response_model=list[EventRead])
def upcoming_events(
    today: Optional[date] = Query(None),
    svc: ResourceService = Depends(get_service),
):
    """
    Events dated today or later, soonest first.

    `today` overrides the server's date (e.g. a client in another timezone):
      GET /api/events/upcoming?today=2025-01-06
    """
    return views.upcoming(svc.list(EVENTS), today)


@router.post("", response_model=EventRead)
def create_event(payload: EventCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(EVENTS, payload.model_dump())


@router.get("/{event_id}", response_model=EventRead)
def get_event(event_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(EVENTS, event_id)


@router.patch("/{event_id}", response_model=EventRead)
def update_event(
    event_id: str,
    payload: EventUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(EVENTS, event_id, payload.changes())


@router.delete("/{event_id}", response_model=OkResponse)
def delete_event(event_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(EVENTS, event_id)
    return OkResponse()
