"""Thin client for the organizer API.

Mirrors the calls the web UI makes, so scripts (seeding, backups) and tests can
talk to a running server the same way. Any ``httpx.Client`` works as the
transport, including FastAPI's ``TestClient``.
"""
import logging
from typing import Any, Optional

import httpx

from app.core.constants import API_PREFIX


log = logging.getLogger(__name__)

# kind -> collection path under /api
PATHS = {
    "classes": "/classes",
    "work_items": "/work-items",
    "important_dates": "/important-dates",
    "ideas": "/ideas",
    "events": "/events",
    "workouts": "/workouts",
    "bike_ideas": "/bike/ideas",
    "bike_events": "/bike/events",
}


class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"API {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class OrganizerClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ---------- generic ----------
    def _request(self, method: str, path: str, body: Optional[dict] = None):
        r = self.http.request(method, f"{API_PREFIX}{path}", json=body)
        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = r.text
            detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
            raise ApiError(r.status_code, detail)
        return r.json()

    def fetch(self, kind: str) -> list[dict]:
        return self._request("GET", PATHS[kind])

    def get(self, kind: str, entity_id: str) -> dict:
        return self._request("GET", f"{PATHS[kind]}/{entity_id}")

    def create(self, kind: str, body: dict) -> dict:
        return self._request("POST", PATHS[kind], body)

    def update(self, kind: str, entity_id: str, patch: dict) -> dict:
        return self._request("PATCH", f"{PATHS[kind]}/{entity_id}", patch)

    def delete(self, kind: str, entity_id: str) -> None:
        self._request("DELETE", f"{PATHS[kind]}/{entity_id}")

    def load(self, kind: str) -> list[dict]:
        """Initial page load: on failure, log it and show an empty list."""
        try:
            return self.fetch(kind)
        except (httpx.HTTPError, ApiError) as e:
            log.warning("failed to load %s: %s", kind, e)
            return []

    def health(self) -> bool:
        return bool(self._request("GET", "/health").get("ok"))

    # ---------- classes ----------
    def get_classes(self) -> list[dict]:
        return self.fetch("classes")

    def create_class(self, name: str) -> dict:
        return self.create("classes", {"name": name})

    def delete_class(self, class_id: str) -> None:
        self.delete("classes", class_id)

    def get_class_work_items(self, class_id: str) -> dict:
        """{"pending": [...], "completed": [...]}"""
        return self._request("GET", f"/classes/{class_id}/work-items")

    # ---------- work items ----------
    def get_work_items(self) -> list[dict]:
        return self.fetch("work_items")

    def create_work_item(self, class_id: str, title: str, description: Optional[str] = None) -> dict:
        return self.create(
            "work_items",
            {"classId": class_id, "title": title, "description": description},
        )

    def update_work_item(self, item_id: str, **patch) -> dict:
        return self.update("work_items", item_id, patch)

    def delete_work_item(self, item_id: str) -> None:
        self.delete("work_items", item_id)

    # ---------- important dates ----------
    def get_important_dates(self) -> list[dict]:
        return self.fetch("important_dates")

    def create_important_date(
        self, class_id: str, title: str, date: str, description: Optional[str] = None
    ) -> dict:
        return self.create(
            "important_dates",
            {"classId": class_id, "title": title, "date": date, "description": description},
        )

    def delete_important_date(self, date_id: str) -> None:
        self.delete("important_dates", date_id)

    # ---------- ideas ----------
    def get_ideas(self) -> list[dict]:
        return self.fetch("ideas")

    def create_idea(self, content: str) -> dict:
        return self.create("ideas", {"content": content})

    def update_idea(self, idea_id: str, content: str) -> dict:
        return self.update("ideas", idea_id, {"content": content})

    def delete_idea(self, idea_id: str) -> None:
        self.delete("ideas", idea_id)

    # ---------- events ----------
    def get_events(self) -> list[dict]:
        return self.fetch("events")

    def get_upcoming_events(self) -> list[dict]:
        return self._request("GET", "/events/upcoming")

    def create_event(
        self,
        title: str,
        date: str,
        time: Optional[str] = None,
        description: Optional[str] = None,
    ) -> dict:
        return self.create(
            "events",
            {"title": title, "date": date, "time": time, "description": description},
        )

    def delete_event(self, event_id: str) -> None:
        self.delete("events", event_id)

    # ---------- workouts ----------
    def get_workouts(self) -> list[dict]:
        return self.fetch("workouts")

    def create_workout(
        self,
        type: str,
        date: str,
        exercises: list[dict],
        notes: Optional[str] = None,
    ) -> dict:
        return self.create(
            "workouts",
            {"type": type, "date": date, "notes": notes, "exercises": exercises},
        )

    def delete_workout(self, workout_id: str) -> None:
        self.delete("workouts", workout_id)

    # ---------- bike ----------
    def get_bike_ideas(self) -> list[dict]:
        return self.fetch("bike_ideas")

    def add_bike_idea(self, content: str) -> dict:
        return self.create("bike_ideas", {"content": content})

    def delete_bike_idea(self, idea_id: str) -> None:
        self.delete("bike_ideas", idea_id)

    def get_bike_events(self) -> list[dict]:
        return self.fetch("bike_events")

    def add_bike_event(
        self,
        title: str,
        date: str,
        type: str = "race",
        description: Optional[str] = None,
    ) -> dict:
        return self.create(
            "bike_events",
            {"title": title, "date": date, "type": type, "description": description},
        )

    def delete_bike_event(self, event_id: str) -> None:
        self.delete("bike_events", event_id)
