"""Tests for the task and notification endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def _login(client, email: str) -> dict[str, str]:
    client.post(
        "/register",
        json={"full_name": email.split("@")[0], "email": email, "password": "Secret123"},
    )
    token = client.post("/login", json={"email": email, "password": "Secret123"}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


TASK = {
    "title": "Prepare slides",
    "description": "Team sync",
    "end_date": "2030-03-01",
    "end_time": "10:00:00",
}


def test_task_lifecycle_and_isolation(client) -> None:
    ada = _login(client, "ada@example.com")
    bob = _login(client, "bob@example.com")

    created = client.post("/tasks", json=TASK, headers=ada)
    assert created.status_code == 201
    task = created.json()
    assert task["status"] == "pending"
    assert task["user_id"] == "taskly-001"

    assert [t["id"] for t in client.get("/tasks", headers=ada).json()] == [task["id"]]
    assert client.get("/tasks", headers=bob).json() == []

    forbidden = client.patch(f"/tasks/{task['id']}", json={"status": "completed"}, headers=bob)
    assert forbidden.status_code == 404
    assert client.get("/tasks", headers=ada).json()[0]["status"] == "pending"

    done = client.patch(f"/tasks/{task['id']}", json={"status": "completed"}, headers=ada)
    assert done.status_code == 200
    assert done.json()["status"] == "completed"

    types = [n["type"] for n in client.get("/notifications", headers=ada).json()]
    assert types == ["welcome", "task_created", "task_completed"]


def test_task_validation_errors(client) -> None:
    ada = _login(client, "ada@example.com")

    missing_end = client.post("/tasks", json={"title": "No date"}, headers=ada)
    blank_title = client.post("/tasks", json={**TASK, "title": "  "}, headers=ada)
    extra_field = client.post("/tasks", json={**TASK, "owner": "taskly-002"}, headers=ada)
    bad_status = client.get("/tasks?status=archived", headers=ada)

    assert missing_end.status_code == 422
    assert blank_title.status_code == 400
    assert blank_title.json()["detail"] == "Missing required field: title"
    assert extra_field.status_code == 422
    assert bad_status.status_code == 400


def test_edit_task(client) -> None:
    ada = _login(client, "ada@example.com")
    task = client.post("/tasks", json=TASK, headers=ada).json()

    response = client.put(
        f"/tasks/{task['id']}", json={"title": "Prepare final slides"}, headers=ada
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Prepare final slides"
    assert response.json()["end_time"] == "10:00:00"


def test_times_with_utc_offset_are_accepted(client) -> None:
    ada = _login(client, "ada@example.com")
    offset_task = {
        "title": "Standup",
        "start_date": "2030-03-01",
        "start_time": "10:00:00+00:00",
        "end_date": "2030-03-01",
    }

    created = client.post("/tasks", json=offset_task, headers=ada)
    assert created.status_code == 201

    task = client.post("/tasks", json=TASK, headers=ada).json()
    edited = client.put(
        f"/tasks/{task['id']}",
        json={"start_date": "2030-03-01", "start_time": "09:00:00+00:00"},
        headers=ada,
    )
    assert edited.status_code == 200

    backwards = client.put(
        f"/tasks/{task['id']}",
        json={"start_date": "2030-03-01", "start_time": "11:00:00+00:00"},
        headers=ada,
    )
    assert backwards.status_code == 400


def test_notification_read_flow(client) -> None:
    ada = _login(client, "ada@example.com")
    bob = _login(client, "bob@example.com")
    client.post("/tasks", json=TASK, headers=ada)

    notifications = client.get("/notifications", headers=ada).json()
    assert all(n["read"] is False for n in notifications)
    assert client.get("/notifications/unread-count", headers=ada).json() == {"unread": 2}

    first_id = notifications[0]["id"]
    assert client.patch(f"/notifications/{first_id}", headers=bob).status_code == 404

    once = client.patch(f"/notifications/{first_id}", headers=ada)
    twice = client.patch(f"/notifications/{first_id}", headers=ada)
    assert once.status_code == twice.status_code == 200
    assert once.json()["read"] is twice.json()["read"] is True

    unread = client.get("/notifications?unread_only=true", headers=ada).json()
    assert [n["type"] for n in unread] == ["task_created"]

    assert client.patch("/notifications/read-all", headers=ada).json() == {"updated": 1}
    assert client.get("/notifications/unread-count", headers=ada).json() == {"unread": 0}


def test_state_survives_restart(client, data_file) -> None:
    from fastapi.testclient import TestClient

    from app.infrastructure.datastore import reset_datastore
    from main import create_app

    ada = _login(client, "ada@example.com")
    client.post("/tasks", json=TASK, headers=ada)

    reset_datastore()
    with TestClient(create_app()) as restarted:
        tasks = restarted.get("/tasks", headers=ada).json()

    assert [t["title"] for t in tasks] == ["Prepare slides"]
    assert data_file.exists()
