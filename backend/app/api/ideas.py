from fastapi import APIRouter, Depends

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.idea import IdeaCreate, IdeaRead, IdeaUpdate
from app.services import views
from app.services.resources import ResourceService
from app.services.store import IDEAS


router = APIRouter(prefix="/ideas", tags=["ideas"])


@router.get("", response_model=list[IdeaRead])
def list_ideas(svc: ResourceService = Depends(get_service)):
    return views.newest_first(svc.list(IDEAS))


@router.post("", response_model=IdeaRead)
def create_idea(payload: IdeaCreate, svc: ResourceService = Depends(get_service)):
    return svc.create(IDEAS, payload.model_dump())


@router.get("/{idea_id}", response_model=IdeaRead)
def get_idea(idea_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(IDEAS, idea_id)


@router.patch("/{idea_id}", response_model=IdeaRead)
def update_idea(
    idea_id: str,
    payload: IdeaUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(IDEAS, idea_id, payload.changes())


@router.delete("/{idea_id}", response_model=OkResponse)
def delete_idea(idea_id: str, svc: ResourceService = Depends(get_service)):
    svc.delete(IDEAS, idea_id)
    return OkResponse()
