"""Resource service: create/update/delete rules shared by every entity kind.

- ids and both timestamps are assigned here, never taken from the client
- create sets created_at == updated_at
- update merges a partial patch and moves updated_at strictly forward
- workouts and their exercises are written and removed as one unit
"""
import logging

from app.core.constants import DEFAULT_REPS, DEFAULT_SETS, DEFAULT_WEIGHT
from app.core.errors import ValidationError
from app.core.time_utils import next_timestamp
from app.models.mixins import new_id
from app.models.workout import Exercise, Workout
from app.services import store as kinds
from app.services.store import EntityStore, Kind


log = logging.getLogger(__name__)

# kinds whose rows hang off a Class through class_id
_CLASS_CHILDREN = (kinds.WORK_ITEMS, kinds.IMPORTANT_DATES)


class ResourceService:
    def __init__(self, store: EntityStore):
        self.store = store

    # ---------- reads ----------
    def list(self, kind: Kind):
        return self.store.list(kind)

    def get(self, kind: Kind, entity_id: str):
        return self.store.get(kind, entity_id)

    # ---------- writes ----------
    def create(self, kind: Kind, data: dict):
        if kind is kinds.WORKOUTS:
            return self.create_workout(data)
        if kind in _CLASS_CHILDREN:
            self._require_class(data.get("class_id"))

        now = next_timestamp()
        entity = kind.model(id=new_id(), created_at=now, updated_at=now, **data)
        return self.store.insert(kind, entity)

    def update(self, kind: Kind, entity_id: str, patch: dict):
        current = self.store.get(kind, entity_id)
        if kind in _CLASS_CHILDREN and "class_id" in patch:
            self._require_class(patch["class_id"])

        patch = dict(patch, updated_at=next_timestamp(current.updated_at))
        return self.store.update(kind, entity_id, patch)

    def delete(self, kind: Kind, entity_id: str) -> None:
        if kind is kinds.CLASSES:
            row = self.store.get(kind, entity_id)
            n_items, n_dates = len(row.work_items), len(row.important_dates)
            if n_items or n_dates:
                log.info(
                    "deleting class %s with %d work items and %d important dates",
                    entity_id,
                    n_items,
                    n_dates,
                )
        self.store.delete(kind, entity_id)

    def create_workout(self, data: dict):
        """Create a workout and its exercises in a single commit.

        Exercise rows with a blank name are dropped first; if nothing is left
        the whole request is rejected.
        """
        rows = [dict(e) for e in data.get("exercises") or []]
        valid = [e for e in rows if (e.get("name") or "").strip()]
        if not valid:
            raise ValidationError("at least one exercise required")

        now = next_timestamp()
        workout_id = new_id()
        workout = Workout(
            id=workout_id,
            type=data["type"],
            date=data["date"],
            notes=data.get("notes"),
            created_at=now,
            updated_at=now,
        )
        for position, e in enumerate(valid):
            workout.exercises.append(
                Exercise(
                    id=new_id(),
                    workout_id=workout_id,
                    position=position,
                    name=e["name"].strip(),
                    sets=e.get("sets", DEFAULT_SETS),
                    reps=e.get("reps", DEFAULT_REPS),
                    weight=e.get("weight", DEFAULT_WEIGHT),
                )
            )
        created = self.store.insert(kinds.WORKOUTS, workout)
        log.info(
            "created %s workout %s with %d exercises (%d blank rows dropped)",
            created.type.value,
            created.id,
            len(valid),
            len(rows) - len(valid),
        )
        return created

    def _require_class(self, class_id) -> None:
        if not class_id or self.store.find(kinds.CLASSES, class_id) is None:
            raise ValidationError(f"Unknown classId: {class_id!r}")
