from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.school import (
    ClassCreate,
    ClassRead,
    ClassUpdate,
    ImportantDateRead,
    WorkItemPartition,
)
from app.services import views
from app.services.resources import ResourceService
from app.services.store import CLASSES, IMPORTANT_DATES, WORK_ITEMS


router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=list[ClassRead])
def list_classes(svc: ResourceService = Depends(get_service)):
    # Newest first
    return svc.list(CLASSES)


@router.post("", response_model=ClassRead)
def create_class(payload: ClassCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(CLASSES, payload.model_dump())


@router.get("/{class_id}", response_model=ClassRead)
def get_class(class_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(CLASSES, class_id)


@router.patch("/{class_id}", response_model=ClassRead)
def update_class(
    class_id: str,
    payload: ClassUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(CLASSES, class_id, payload.changes())


@router.delete("/{class_id}", response_model=OkResponse)
def delete_class(class_id: str, svc: ResourceService = Depends(get_service)):
    """Delete a class together with its work items and important dates."""
    svc.delete(CLASSES, class_id)
    return OkResponse()


@router.get("/{class_id}/work-items", response_model=WorkItemPartition)
def class_work_items(class_id: str, svc: ResourceService = Depends(get_service)):
    """
    Work items of one class split into pending and completed.

    Both groups keep the work-item list order (newest first).
    """
    svc.get(CLASSES, class_id)
    pending, completed = views.partition_by_completed(
        views.for_class(svc.list(WORK_ITEMS), class_id)
    )
    return {"pending": pending, "completed": completed}


@router.get("/{class_id}/important-dates", response_model=list[ImportantDateRead])
def class_important_dates(
    class_id: str,
    upcoming: bool = Query(False),
    today: Optional[date] = Query(None),
    svc: ResourceService = Depends(get_service),
):
    svc.get(CLASSES, class_id)
    rows = views.for_class(svc.list(IMPORTANT_DATES), class_id)
    if upcoming:
        rows = views.upcoming(rows, today)
    return rows
