"""Read-only projections over entity lists.

Everything here is a pure function of its input and recomputed on every call.
Sorts are stable, so items with equal keys keep the order they came in
(creation order for the store's lists).
"""
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from app.core.time_utils import as_utc
from app.models.workout import WorkoutType


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def newest_first(items: Iterable) -> list:
    """Ideas / bike ideas: most recently created first."""
    return sorted(items, key=lambda x: as_utc(x.created_at), reverse=True)


def upcoming(items: Iterable, now: Optional[date | datetime] = None) -> list:
    """Events, bike events, important dates dated today or later, soonest first.

    `now` is the caller's current moment (defaults to today); only its calendar
    day matters because entity dates carry no time of day.
    """
    today = _as_date(now) if now is not None else date.today()
    kept = [x for x in items if _as_date(x.date) >= today]
    return sorted(kept, key=lambda x: _as_date(x.date))


def partition_by_completed(items: Iterable) -> tuple[list, list]:
    """Split work items into (pending, completed), each in input order."""
    pending, completed = [], []
    for item in items:
        (completed if item.completed else pending).append(item)
    return pending, completed


def partition_by_type(workouts: Iterable) -> dict[str, list]:
    """Group workouts under PUSH / PULL / LEGS, each newest date first.

    All three keys are always present.
    """
    groups: dict[str, list] = {t.value: [] for t in WorkoutType}
    for w in workouts:
        key = w.type.value if isinstance(w.type, WorkoutType) else str(w.type)
        groups.setdefault(key, []).append(w)
    return {
        key: sorted(rows, key=lambda w: _as_date(w.date), reverse=True)
        for key, rows in groups.items()
    }


def for_class(items: Sequence, class_id: str) -> list:
    """Work items / important dates that belong to one class."""
    return [x for x in items if x.class_id == class_id]
