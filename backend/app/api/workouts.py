from fastapi import APIRouter, Depends

from app.api.deps import get_service
from app.schemas.common import OkResponse
from app.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from app.services import views
from app.services.resources import ResourceService
from app.services.store import WORKOUTS


router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("", response_model=list[WorkoutRead])
def list_workouts(svc: ResourceService = Depends(get_service)):
    # Most recent date first, exercises included
    return svc.list(WORKOUTS)


@router.get("/by-type", response_model=dict[str, list[WorkoutRead]])
def workouts_by_type(svc: ResourceService = Depends(get_service)):
    return views.partition_by_type(svc.list(WORKOUTS))


@router.post("", response_model=WorkoutRead)
def create_workout(payload: WorkoutCreate, svc: ResourceService = Depends(get_service)):
    """
    Create a workout and its exercises in one transaction.

    Exercise rows with a blank name are ignored; at least one must remain.
    """
    return svc.create(WORKOUTS, payload.model_dump())


@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: str, svc: ResourceService = Depends(get_service)):
    return svc.get(WORKOUTS, workout_id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: str,
    payload: WorkoutUpdate,
    svc: ResourceService = Depends(get_service),
):
    return svc.update(WORKOUTS, workout_id, payload.changes())


@router.delete("/{workout_id}", response_model=OkResponse)
def delete_workout(workout_id: str, svc: ResourceService = Depends(get_service)):
    # exercises go with it
    svc.delete(WORKOUTS, workout_id)
    return OkResponse()
