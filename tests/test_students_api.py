"""Student endpoints: /api/students."""
from app.directory.models.student import DEFAULT_STUDENT_IMAGE_URL


def _campus(client):
    return client.post("/api/campuses", json={"name": "Hunter", "address": "695 Park Ave"}).json()


def test_list_is_empty_array(client):
    r = client.get("/api/students")
    assert r.status_code == 200
    assert r.json() == []


def test_create_unassigned_student(client):
    r = client.post("/api/students", json={"firstname": "Joe", "lastname": "Smith", "email": "joe@x.edu"})
    assert r.status_code == 200
    body = r.json()
    assert body["campusId"] is None
    assert body["imageUrl"] == DEFAULT_STUDENT_IMAGE_URL
    assert body["gpa"] is None


def test_get_embeds_campus(client):
    campus = _campus(client)
    created = client.post(
        "/api/students",
        json={"firstname": "Mary", "lastname": "J", "email": "m@x.edu", "gpa": 3.8, "campusId": campus["id"]},
    ).json()

    body = client.get(f"/api/students/{created['id']}").json()
    assert body["gpa"] == 3.8
    assert body["campus"]["id"] == campus["id"]
    assert body["campus"]["name"] == "Hunter"

    flat = client.get(f"/api/students/{created['id']}", params={"include": "false"}).json()
    assert "campus" not in flat
    assert flat["campusId"] == campus["id"]


def test_create_with_unknown_campus_is_500(client):
    r = client.post(
        "/api/students",
        json={"firstname": "A", "lastname": "B", "email": "a@b.edu", "campusId": 42},
    )
    assert r.status_code == 500
    assert client.get("/api/students").json() == []


def test_create_missing_fields_is_500(client):
    r = client.post("/api/students", json={"firstname": "Only"})
    assert r.status_code == 500


def test_get_missing_returns_null(client):
    r = client.get("/api/students/5")
    assert r.status_code == 200
    assert r.json() is None


def test_update_moves_student_between_campuses(client):
    first = _campus(client)
    second = client.post("/api/campuses", json={"name": "Queens", "address": "Kissena"}).json()
    student = client.post(
        "/api/students",
        json={"firstname": "A", "lastname": "B", "email": "a@b.edu", "campusId": first["id"]},
    ).json()

    r = client.put(f"/api/students/{student['id']}", json={"campusId": second["id"]})
    assert r.json() == [1]

    assert client.get(f"/api/campuses/{first['id']}").json()["students"] == []
    moved = client.get(f"/api/campuses/{second['id']}").json()["students"]
    assert [s["id"] for s in moved] == [student["id"]]


def test_update_with_empty_body_counts_matched_row(client):
    student = client.post("/api/students", json={"firstname": "A", "lastname": "B", "email": "a@b.edu"}).json()
    assert client.put(f"/api/students/{student['id']}", json={}).json() == [1]
    assert client.put("/api/students/999", json={}).json() == [0]


def test_update_and_delete_missing(client):
    assert client.put("/api/students/77", json={"firstname": "X"}).json() == [0]
    assert client.delete("/api/students/77").json() == 0


def test_delete_student(client):
    student = client.post("/api/students", json={"firstname": "A", "lastname": "B", "email": "a@b.edu"}).json()
    assert client.delete(f"/api/students/{student['id']}").json() == 1
    assert client.get("/api/students").json() == []


def test_seeded_students_reference_campuses(client, seeded):
    students = client.get("/api/students").json()
    assert len(students) == 4
    assigned = [s for s in students if s["campusId"] is not None]
    assert assigned
    for s in assigned:
        assert s["campus"]["id"] == s["campusId"]
    unassigned = [s for s in students if s["campusId"] is None]
    assert all(s["campus"] is None for s in unassigned)
