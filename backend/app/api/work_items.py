from fastapi import APIRouter, Depends

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.school import WorkItemCreate, WorkItemRead, WorkItemUpdate
from app.services.resources import ResourceService
from app.services.store import WORK_ITEMS


router = APIRouter(prefix="/work-items", tags=["work-items"])


@router.get("", response_model=list[WorkItemRead])
def list_work_items(svc: ResourceService = Depends(get_service)):
    return svc.list(WORK_ITEMS)


@router.post("", response_model=WorkItemRead)
def create_work_item(payload: WorkItemCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(WORK_ITEMS, payload.model_dump())


@router.get("/{item_id}", response_model=WorkItemRead)
def get_work_item(item_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(WORK_ITEMS, item_id)


@router.patch("/{item_id}", response_model=WorkItemRead)
def update_work_item(
    item_id: str,
    payload: WorkItemUpdate,
    svc: ResourceService = Depends(get_service),
):
    # e.g. {"completed": true} when ticking an item off
    return svc.update(WORK_ITEMS, item_id, payload.changes())


@router.delete("/{item_id}", response_model=OkResponse)
def delete_work_item(item_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(WORK_ITEMS, item_id)
    return OkResponse()
