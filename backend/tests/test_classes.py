from datetime import date, timedelta

from app.models.school import ImportantDate, WorkItem


def test_work_item_moves_from_pending_to_completed(client, make_class):
    cls = make_class("Algorithms")

    r = client.post("/api/work-items", json={"title": "HW1", "classId": cls["id"]})
    assert r.status_code == 200, r.text
    item = r.json()
    assert item["completed"] is False
    assert item["classId"] == cls["id"]

    groups = client.get(f"/api/classes/{cls['id']}/work-items").json()
    assert [w["id"] for w in groups["pending"]] == [item["id"]]
    assert groups["completed"] == []

    r = client.patch(f"/api/work-items/{item['id']}", json={"completed": True})
    assert r.status_code == 200, r.text
    assert r.json()["completed"] is True

    groups = client.get(f"/api/classes/{cls['id']}/work-items").json()
    assert groups["pending"] == []
    assert [w["id"] for w in groups["completed"]] == [item["id"]]


def test_partition_is_disjoint_cover_for_class(client, make_class):
    algo = make_class("Algorithms")
    os_cls = make_class("Operating Systems")
    ids = []
    for i in range(5):
        r = client.post("/api/work-items", json={"title": f"HW{i}", "classId": algo["id"]})
        ids.append(r.json()["id"])
    client.post("/api/work-items", json={"title": "Lab 1", "classId": os_cls["id"]})
    for item_id in ids[::2]:
        client.patch(f"/api/work-items/{item_id}", json={"completed": True})

    groups = client.get(f"/api/classes/{algo['id']}/work-items").json()
    pending = {w["id"] for w in groups["pending"]}
    completed = {w["id"] for w in groups["completed"]}
    assert pending.isdisjoint(completed)
    assert pending | completed == set(ids)
    assert all(w["completed"] for w in groups["completed"])
    assert not any(w["completed"] for w in groups["pending"])


def test_classes_listed_newest_first(client, make_class):
    a = make_class("First")
    b = make_class("Second")
    names = [c["id"] for c in client.get("/api/classes").json()]
    assert names == [b["id"], a["id"]]


def test_rename_class(client, make_class):
    cls = make_class("Algos")
    r = client.patch(f"/api/classes/{cls['id']}", json={"name": "  Algorithms  "})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Algorithms"

    r = client.patch(f"/api/classes/{cls['id']}", json={"name": ""})
    assert r.status_code == 400


def test_blank_class_name_rejected(client):
    r = client.post("/api/classes", json={"name": "   "})
    assert r.status_code == 400
    assert r.json()["error"] == "validation_error"
    assert client.get("/api/classes").json() == []


def test_work_item_for_unknown_class_rejected(client, make_class):
    r = client.post("/api/work-items", json={"title": "HW1", "classId": "missing"})
    assert r.status_code == 400
    assert "classId" in r.json()["detail"]

    cls = make_class()
    item = client.post("/api/work-items", json={"title": "HW1", "classId": cls["id"]}).json()
    r = client.patch(f"/api/work-items/{item['id']}", json={"classId": "missing"})
    assert r.status_code == 400
    assert client.get(f"/api/work-items/{item['id']}").json()["classId"] == cls["id"]


def test_deleting_class_cascades_to_children(client, db, make_class):
    keep = make_class("Keep")
    drop = make_class("Drop")
    for cls in (keep, drop):
        client.post("/api/work-items", json={"title": "HW", "classId": cls["id"]})
        client.post(
            "/api/important-dates",
            json={"title": "Exam", "date": "2030-05-01", "classId": cls["id"]},
        )

    r = client.delete(f"/api/classes/{drop['id']}")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

    assert client.get(f"/api/classes/{drop['id']}").status_code == 404
    assert db.query(WorkItem).filter(WorkItem.class_id == drop["id"]).count() == 0
    assert db.query(ImportantDate).filter(ImportantDate.class_id == drop["id"]).count() == 0
    assert db.query(WorkItem).filter(WorkItem.class_id == keep["id"]).count() == 1
    assert db.query(ImportantDate).filter(ImportantDate.class_id == keep["id"]).count() == 1


def test_class_important_dates_upcoming(client, make_class):
    cls = make_class()
    other = make_class("Other")
    today = date.today()
    for title, days, owner in [
        ("Final", 30, cls),
        ("Past quiz", -3, cls),
        ("Midterm", 7, cls),
        ("Other exam", 1, other),
    ]:
        r = client.post(
            "/api/important-dates",
            json={
                "title": title,
                "date": (today + timedelta(days=days)).isoformat(),
                "classId": owner["id"],
            },
        )
        assert r.status_code == 200, r.text

    all_rows = client.get(f"/api/classes/{cls['id']}/important-dates").json()
    assert [d["title"] for d in all_rows] == ["Past quiz", "Midterm", "Final"]

    upcoming = client.get(
        f"/api/classes/{cls['id']}/important-dates", params={"upcoming": "true"}
    ).json()
    assert [d["title"] for d in upcoming] == ["Midterm", "Final"]


def test_class_views_for_unknown_class_404(client):
    assert client.get("/api/classes/nope/work-items").status_code == 404
    assert client.get("/api/classes/nope/important-dates").status_code == 404
