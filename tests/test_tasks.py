# tests/test_tasks.py

from __future__ import annotations

from uuid import uuid4

import pytest


@pytest.fixture()
def project(client, auth) -> dict:
    resp = client.post("/api/project/create-project", json={"name": "Roadmap"}, headers=auth)
    assert resp.status_code == 201
    return resp.json()


def _create_task(client, headers, project_id, **fields) -> dict:
    body = {"title": "Write docs", "status": "pending", **fields}
    resp = client.post(f"/api/project/tasks/{project_id}", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def _list(client, headers, project_id, **params) -> dict:
    resp = client.get(f"/api/project/tasks/{project_id}", params=params, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_create_task(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"],
                        description="API reference", dueDate="2030-05-01T12:00:00")

    assert task["title"] == "Write docs"
    assert task["status"] == "pending"
    assert task["projectId"] == project["id"]
    assert task["dueDate"] == "2030-05-01T12:00:00"
    assert task["deletedAt"] is None


def test_create_task_normalizes_aware_due_date(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"], dueDate="2030-05-01T14:00:00+02:00")

    assert task["dueDate"] == "2030-05-01T12:00:00"


@pytest.mark.parametrize("body", [
    {"status": "pending"},
    {"title": "", "status": "pending"},
    {"title": "x", "status": "done"},
    {"title": "x", "status": "pending", "dueDate": "tomorrow"},
])
def test_create_task_validation(client, auth, project, body) -> None:
    resp = client.post(f"/api/project/tasks/{project['id']}", json=body, headers=auth)

    assert resp.status_code == 422


def test_create_task_in_missing_project(client, auth) -> None:
    resp = client.post(f"/api/project/tasks/{uuid4()}",
                       json={"title": "x", "status": "pending"}, headers=auth)

    assert resp.status_code == 404


def test_create_task_in_foreign_project(client, other_auth, project) -> None:
    resp = client.post(f"/api/project/tasks/{project['id']}",
                       json={"title": "x", "status": "pending"}, headers=other_auth)

    assert resp.status_code == 401


def test_list_tasks_paginates(client, auth, project) -> None:
    for i in range(25):
        _create_task(client, auth, project["id"], title=f"task {i}")

    page = _list(client, auth, project["id"], page=1, limit=10)

    assert len(page["tasks"]) == 10
    assert page["total"] == 25
    assert page["totalPages"] == 3
    assert page["tasks"][0]["title"] == "task 0"
    assert len(_list(client, auth, project["id"], page=3, limit=10)["tasks"]) == 5


def test_list_tasks_filters_by_status(client, auth, project) -> None:
    _create_task(client, auth, project["id"], title="a", status="pending")
    _create_task(client, auth, project["id"], title="b", status="in-progress")
    _create_task(client, auth, project["id"], title="c", status="completed")

    page = _list(client, auth, project["id"], status="in-progress")

    assert [t["title"] for t in page["tasks"]] == ["b"]
    assert page["total"] == 1


def test_list_tasks_filters_by_due_date(client, auth, project) -> None:
    _create_task(client, auth, project["id"], title="early", dueDate="2030-01-01T00:00:00")
    _create_task(client, auth, project["id"], title="edge", dueDate="2030-02-01T00:00:00")
    _create_task(client, auth, project["id"], title="late", dueDate="2030-03-01T00:00:00")
    _create_task(client, auth, project["id"], title="undated")

    page = _list(client, auth, project["id"], dueDate="2030-02-01T00:00:00")

    assert [t["title"] for t in page["tasks"]] == ["early", "edge"]


def test_list_tasks_rejects_unknown_status(client, auth, project) -> None:
    resp = client.get(f"/api/project/tasks/{project['id']}", params={"status": "done"}, headers=auth)

    assert resp.status_code == 422


def test_list_tasks_of_foreign_project(client, other_auth, project) -> None:
    resp = client.get(f"/api/project/tasks/{project['id']}", headers=other_auth)

    assert resp.status_code == 401


def test_get_task(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"])

    resp = client.get(f"/api/project/tasks/task/{task['id']}", headers=auth)

    assert resp.status_code == 200
    assert resp.json() == task


def test_get_task_of_other_user(client, auth, other_auth, project) -> None:
    task = _create_task(client, auth, project["id"])

    assert client.get(f"/api/project/tasks/task/{task['id']}", headers=other_auth).status_code == 401
    assert client.get(f"/api/project/tasks/task/{uuid4()}", headers=auth).status_code == 404


def test_update_task(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"], description="draft", dueDate="2030-01-01T00:00:00")

    resp = client.put(f"/api/project/tasks/{task['id']}",
                      json={"status": "in-progress", "dueDate": None, "title": None},
                      headers=auth)

    assert resp.status_code == 200
    updated = resp.json()
    assert updated["status"] == "in-progress"
    assert updated["dueDate"] is None
    assert updated["title"] == "Write docs"
    assert updated["description"] == "draft"
    assert updated["projectId"] == project["id"]


def test_update_task_by_non_owner(client, store, auth, other_auth, project) -> None:
    task = _create_task(client, auth, project["id"])

    resp = client.put(f"/api/project/tasks/{task['id']}", json={"status": "completed"}, headers=other_auth)

    assert resp.status_code == 401
    assert next(iter(store.tasks.values())).status.value == "pending"


def test_soft_delete_hides_task_from_list(client, store, auth, project) -> None:
    keep = _create_task(client, auth, project["id"], title="keep")
    drop = _create_task(client, auth, project["id"], title="drop")

    resp = client.delete(f"/api/project/tasks/{drop['id']}", headers=auth)

    assert resp.status_code == 200
    assert resp.json() == {"message": "Task deleted successfully"}
    page = _list(client, auth, project["id"])
    assert [t["id"] for t in page["tasks"]] == [keep["id"]]
    assert page["total"] == 1
    assert len(store.tasks) == 2


def test_soft_deleted_task_is_retrievable_by_id(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"])
    client.delete(f"/api/project/tasks/{task['id']}", headers=auth)

    resp = client.get(f"/api/project/tasks/task/{task['id']}", headers=auth)

    assert resp.status_code == 200
    assert resp.json()["deletedAt"] is not None


def test_soft_deleted_task_cannot_be_changed(client, auth, project) -> None:
    task = _create_task(client, auth, project["id"])
    client.delete(f"/api/project/tasks/{task['id']}", headers=auth)

    assert client.delete(f"/api/project/tasks/{task['id']}", headers=auth).status_code == 404
    assert client.put(f"/api/project/tasks/{task['id']}",
                      json={"status": "completed"}, headers=auth).status_code == 404


def test_delete_task_by_non_owner(client, auth, other_auth, project) -> None:
    task = _create_task(client, auth, project["id"])

    resp = client.delete(f"/api/project/tasks/{task['id']}", headers=other_auth)

    assert resp.status_code == 401
    assert _list(client, auth, project["id"])["total"] == 1


def test_bulk_update_status(client, auth, project) -> None:
    first = _create_task(client, auth, project["id"], title="first")
    second = _create_task(client, auth, project["id"], title="second")
    deleted = _create_task(client, auth, project["id"], title="deleted")
    _create_task(client, auth, project["id"], title="untouched")
    client.delete(f"/api/project/tasks/{deleted['id']}", headers=auth)

    resp = client.patch("/api/project/tasks/bulk-update-status",
                        json={"taskIds": [first["id"], second["id"], deleted["id"], str(uuid4())],
                              "status": "completed"},
                        headers=auth)

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Tasks updated successfully"
    assert sorted(t["title"] for t in body["updatedTasks"]) == ["first", "second"]
    assert all(t["status"] == "completed" for t in body["updatedTasks"])
    statuses = {t["title"]: t["status"] for t in _list(client, auth, project["id"])["tasks"]}
    assert statuses == {"first": "completed", "second": "completed", "untouched": "pending"}
    direct = client.get(f"/api/project/tasks/task/{deleted['id']}", headers=auth).json()
    assert direct["status"] == "pending"


def test_bulk_update_ignores_foreign_tasks(client, auth, other_auth, project) -> None:
    task = _create_task(client, auth, project["id"])

    resp = client.patch("/api/project/tasks/bulk-update-status",
                        json={"taskIds": [task["id"]], "status": "completed"},
                        headers=other_auth)

    assert resp.status_code == 200
    assert resp.json()["updatedTasks"] == []
    assert _list(client, auth, project["id"])["tasks"][0]["status"] == "pending"


@pytest.mark.parametrize("body", [
    {"taskIds": [], "status": "completed"},
    {"taskIds": ["not-an-id"], "status": "completed"},
    {"taskIds": [str(uuid4())], "status": "archived"},
])
def test_bulk_update_validation(client, auth, body) -> None:
    resp = client.patch("/api/project/tasks/bulk-update-status", json=body, headers=auth)

    assert resp.status_code == 422


def test_non_owner_gets_401_for_soft_deleted_task(client, auth, other_auth, project) -> None:
    task = _create_task(client, auth, project["id"])
    client.delete(f"/api/project/tasks/{task['id']}", headers=auth)

    deleted = client.delete(f"/api/project/tasks/{task['id']}", headers=other_auth)
    updated = client.put(f"/api/project/tasks/{task['id']}", json={"title": "x"}, headers=other_auth)

    assert deleted.status_code == 401
    assert deleted.json()["detail"] == "You are not authorized to delete this task"
    assert updated.status_code == 401
    assert updated.json()["detail"] == "You are not authorized to update this task"
