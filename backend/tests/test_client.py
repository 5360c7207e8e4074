import httpx
import pytest

from app.client import ApiError, OrganizerClient


@pytest.fixture()
def api(client):
    # TestClient is an httpx.Client, so the real client code runs against the app
    return OrganizerClient(http=client)


def test_class_workflow(api):
    assert api.health() is True
    cls = api.create_class("Algorithms")
    item = api.create_work_item(cls["id"], "HW1")
    api.update_work_item(item["id"], completed=True)

    groups = api.get_class_work_items(cls["id"])
    assert [w["title"] for w in groups["completed"]] == ["HW1"]
    assert groups["pending"] == []

    api.create_important_date(cls["id"], "Midterm", "2030-03-01")
    assert [d["title"] for d in api.get_important_dates()] == ["Midterm"]

    api.delete_class(cls["id"])
    assert api.get_classes() == []
    assert api.get_work_items() == []
    assert api.get_important_dates() == []


def test_ideas_and_events(api):
    idea = api.create_idea("A")
    api.update_idea(idea["id"], "A, revised")
    assert [i["content"] for i in api.get_ideas()] == ["A, revised"]
    api.delete_idea(idea["id"])
    assert api.get_ideas() == []

    ev = api.create_event("Talk", "2099-01-01", time="18:00")
    assert [e["id"] for e in api.get_upcoming_events()] == [ev["id"]]
    api.delete_event(ev["id"])
    assert api.get_events() == []


def test_workout_and_bike(api):
    w = api.create_workout(
        "PULL",
        "2030-01-01",
        [{"name": "Row", "sets": 3, "reps": 8, "weight": 95}, {"name": ""}],
    )
    assert len(w["exercises"]) == 1
    assert api.get_workouts()[0]["id"] == w["id"]
    api.delete_workout(w["id"])

    api.add_bike_idea("Tubeless")
    ev = api.add_bike_event("Century ride", "2030-07-04", type="trip")
    assert ev["type"] == "trip"
    assert len(api.get_bike_ideas()) == 1
    api.delete_bike_event(ev["id"])
    assert api.get_bike_events() == []


def test_errors_raise_api_error(api):
    with pytest.raises(ApiError) as exc:
        api.delete_idea("missing")
    assert exc.value.status_code == 404
    assert exc.value.detail == "Idea not found"

    with pytest.raises(ApiError) as exc:
        api.create_workout("PUSH", "2030-01-01", [{"name": ""}])
    assert exc.value.status_code == 400
    assert exc.value.detail == "at least one exercise required"


def test_load_returns_empty_list_on_failure(caplog):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = OrganizerClient(http=httpx.Client(base_url="http://organizer", transport=httpx.MockTransport(boom)))
    with caplog.at_level("WARNING", logger="app.client"):
        assert api.load("ideas") == []
    assert "failed to load ideas" in caplog.text


def test_load_returns_empty_list_on_server_error():
    def server_error(request):
        return httpx.Response(500, json={"error": "storage_failure", "detail": "db down"})

    api = OrganizerClient(http=httpx.Client(base_url="http://organizer", transport=httpx.MockTransport(server_error)))
    assert api.load("events") == []
    with pytest.raises(ApiError) as exc:
        api.get_events()
    assert exc.value.detail == "db down"


def test_load_passes_data_through(api):
    api.create_idea("A")
    assert [i["content"] for i in api.load("ideas")] == ["A"]
