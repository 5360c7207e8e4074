from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.school import ImportantDateCreate, ImportantDateRead, ImportantDateUpdate
from app.services import views
from app.services.resources import ResourceService
from app.services.store import IMPORTANT_DATES


router = APIRouter(prefix="/important-dates", tags=["important-dates"])


@router.get("", response_model=list[ImportantDateRead])
def list_important_dates(svc: ResourceService = Depends(get_service)):
    # Soonest first, past dates included
    return svc.list(IMPORTANT_DATES)


@router.get("/upcoming", response_model=list[ImportantDateRead])
def upcoming_important_dates(
    today: Optional[date] = Query(None),
    svc: ResourceService = Depends(get_service),
):
    return views.upcoming(svc.list(IMPORTANT_DATES), today)


@router.post("", response_model=ImportantDateRead)
def create_important_date(
    payload: ImportantDateCreate,
    svc: ResourceService = Depends(get_service),
):
    return svc.create(IMPORTANT_DATES, payload.model_dump())


@router.get("/{date_id}", response_model=ImportantDateRead)
def get_important_date(date_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(IMPORTANT_DATES, date_id)


@router.patch("/{date_id}", response_model=ImportantDateRead)
def update_important_date(
    date_id: str,
    payload: ImportantDateUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(IMPORTANT_DATES, date_id, payload.changes())


@router.delete("/{date_id}", response_model=OkResponse)
def delete_important_date(date_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(IMPORTANT_DATES, date_id)
    return OkResponse()
