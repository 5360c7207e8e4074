from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_service
from app.schemas.bike import (
    BikeEventCreate,
    BikeEventRead,
    BikeEventUpdate,
    BikeIdeaCreate,
    BikeIdeaRead,
    BikeIdeaUpdate,
)
from app.schemas.common import OkResponse
from app.services import views
from app.services.resources import ResourceService
from app.services.store import BIKE_EVENTS, BIKE_IDEAS


router = APIRouter(prefix="/bike", tags=["bike"])


# ---- Ideas
@router.get("/ideas", response_model=list[BikeIdeaRead])
def list_bike_ideas(svc: ResourceService = Depends(get_service)):
    return views.newest_first(svc.list(BIKE_IDEAS))


@router.post("/ideas", response_model=BikeIdeaRead)
def create_bike_idea(payload: BikeIdeaCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(BIKE_IDEAS, payload.model_dump())


@router.get("/ideas/{idea_id}", response_model=BikeIdeaRead)
def get_bike_idea(idea_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(BIKE_IDEAS, idea_id)


@router.patch("/ideas/{idea_id}", response_model=BikeIdeaRead)
def update_bike_idea(
    idea_id: str,
    payload: BikeIdeaUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(BIKE_IDEAS, idea_id, payload.changes())


@router.delete("/ideas/{idea_id}", response_model=OkResponse)
def delete_bike_idea(idea_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(BIKE_IDEAS, idea_id)
    return OkResponse()


# ---- Events
@router.get("/events", response_model=list[BikeEventRead])
def list_bike_events(svc: ResourceService = Depends(get_service)):
    return svc.list(BIKE_EVENTS)


@router.get("/events/upcoming", response_model=list[BikeEventRead])
def upcoming_bike_events(
    today: Optional[date] = Query(None),
    svc: ResourceService = Depends(get_service),
):
    return views.upcoming(svc.list(BIKE_EVENTS), today)


@router.post("/events", response_model=BikeEventRead)
def create_bike_event(payload: BikeEventCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(BIKE_EVENTS, payload.model_dump())


@router.get("/events/{event_id}", response_model=BikeEventRead)
def get_bike_event(event_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(BIKE_EVENTS, event_id)


@router.patch("/events/{event_id}", response_model=BikeEventRead)
def update_bike_event(
    event_id: str,
    payload: BikeEventUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(BIKE_EVENTS, event_id, payload.changes())


@router.delete("/events/{event_id}", response_model=OkResponse)
def delete_bike_event(event_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(BIKE_EVENTS, event_id)
    return OkResponse()
