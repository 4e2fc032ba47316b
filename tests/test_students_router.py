# /tests/test_students_router.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from student_db.main import create_app


@pytest.fixture
def client(database, assets):
    app = create_app(database=database, assets=assets)
    with TestClient(app) as test_client:
        yield test_client


def _photo(make_photo, name="upload.png"):
    return {"photo": (name, Path(make_photo(name)).read_bytes(), "image/png")}


def _form(name="Asha Rao", place="Pune", contact="9876543210"):
    return {"name": name, "place": place, "contact": contact}


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "Student Directory is running!"


def test_register_list_and_get(client, make_photo):
    response = client.post("/api/students", data=_form(), files=_photo(make_photo))

    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Asha Rao"
    assert created["contact"] == 9876543210
    assert Path(created["imagePath"]).is_file()

    listing = client.get("/api/students").json()
    assert [s["id"] for s in listing] == [created["id"]]
    assert client.get(f"/api/students/{created['id']}").json() == created


def test_register_with_bad_contact_is_422_with_the_reason(client, make_photo):
    response = client.post("/api/students", data=_form(contact="12345"), files=_photo(make_photo))

    assert response.status_code == 422
    assert response.json()["detail"] == "Phone number must contain exactly 10 digits"
    assert client.get("/api/students").json() == []


def test_register_without_photo_is_422(client):
    response = client.post("/api/students", data=_form())

    assert response.status_code == 422
    assert response.json()["detail"] == "Please select a student photo."


def test_register_with_a_non_image_upload_is_400(client):
    files = {"photo": ("notes.txt", b"not a photo", "text/plain")}
    response = client.post("/api/students", data=_form(), files=files)

    assert response.status_code == 400


def test_update_keeps_the_photo_unless_a_new_one_is_sent(client, make_photo):
    created = client.post("/api/students", data=_form(), files=_photo(make_photo)).json()

    response = client.put(f"/api/students/{created['id']}", data=_form(name="Asha R"))

    assert response.status_code == 200
    assert response.json()["rows_affected"] == 1
    updated = client.get(f"/api/students/{created['id']}").json()
    assert updated["name"] == "Asha R"
    assert updated["imagePath"] == created["imagePath"]


def test_update_of_unknown_student_reports_no_change(client, make_photo):
    response = client.put("/api/students/999", data=_form(), files=_photo(make_photo))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["rows_affected"] == 0
    assert "nothing was changed" in body["message"]


def test_search_and_delete(client, make_photo):
    asha = client.post("/api/students", data=_form(), files=_photo(make_photo, "a.png")).json()
    ravi = client.post("/api/students", data=_form(name="Ravi Kumar"), files=_photo(make_photo, "b.png")).json()

    found = client.get("/api/students/search", params={"q": "RAVI"}).json()
    assert [s["id"] for s in found["students"]] == [ravi["id"]]
    assert client.get("/api/students/search", params={"q": "xyz-no-match"}).json()["no_results"] is True

    deleted = client.delete(f"/api/students/{asha['id']}").json()
    assert deleted["success"] is True
    assert [s["id"] for s in client.get("/api/students").json()] == [ravi["id"]]

    state = client.post("/api/students/refresh").json()
    assert state["is_loading"] is False
    assert [s["id"] for s in state["students"]] == [ravi["id"]]


def test_get_unknown_student_is_404(client):
    assert client.get("/api/students/42").status_code == 404


def test_update_of_unknown_student_without_photo_reports_no_change(client):
    response = client.put("/api/students/999", data=_form())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["rows_affected"] == 0
    assert "nothing was changed" in body["message"]
