# tests/test_persistence.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tasklist.formatter import TodoItemFormatter
from tasklist.persistence import (
    TASKS_KEY,
    STORAGE_ENV_VAR,
    THEME_KEY,
    JsonFileStorage,
    MemoryStorage,
    load_tasks,
)
from tasklist.task_store import TodoManager


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        "{\"id\": \"x\"}",
        "[1, 2]",
        "[{\"id\": \"x\", \"task\": \"t\"}]",
        "[{\"id\": 5, \"task\": \"t\", \"dueDate\": \"\", \"completed\": false}]",
        "[{\"id\": \"x\", \"task\": \"t\", \"dueDate\": \"\", \"completed\": \"yes\"}]",
        "[{\"id\": \"x\", \"task\": \"t\", \"dueDate\": null, \"completed\": false}]",
        "[{\"id\": \"x\", \"task\": \"t\", \"dueDate\": \"\", \"completed\": false, \"status\": 7}]",
        "null",
    ],
)
def test_malformed_task_data_loads_as_empty(raw: str) -> None:
    storage = MemoryStorage({TASKS_KEY: raw})
    assert load_tasks(storage) == []
    assert TodoManager(TodoItemFormatter(), storage).filter_todos("all") == []


def test_duplicate_ids_load_as_empty() -> None:
    item = {"id": "x", "task": "t", "dueDate": "No due date", "completed": False, "status": "pending"}
    storage = MemoryStorage({TASKS_KEY: json.dumps([item, item])})
    assert load_tasks(storage) == []


def test_missing_status_is_tolerated() -> None:
    item = {"id": "x", "task": "t", "dueDate": "2024-01-01", "completed": True}
    storage = MemoryStorage({TASKS_KEY: json.dumps([item])})
    (task,) = load_tasks(storage)
    assert task.completed is True
    assert task.status == "pending"


def test_json_file_storage_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "storage.json"
    storage = JsonFileStorage(path)
    assert storage.get(TASKS_KEY) is None

    storage.set(THEME_KEY, "nord")
    storage.set(TASKS_KEY, "[]")

    fresh = JsonFileStorage(path)
    assert fresh.get(THEME_KEY) == "nord"
    assert fresh.get(TASKS_KEY) == "[]"


def test_json_file_storage_survives_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{broken", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get(TASKS_KEY) is None
    manager = TodoManager(TodoItemFormatter(), storage)
    assert manager.filter_todos("all") == []

    todo = manager.add_todo("After corruption", "")
    assert json.loads(path.read_text(encoding="utf-8"))[TASKS_KEY]
    assert TodoManager(TodoItemFormatter(), JsonFileStorage(path)).filter_todos("all")[0].id == todo.id


def test_task_store_does_not_touch_theme_key(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "storage.json")
    storage.set(THEME_KEY, "dracula")
    manager = TodoManager(TodoItemFormatter(), storage)
    manager.add_todo("A", "")
    manager.clear_all_todos()
    assert storage.get(THEME_KEY) == "dracula"


def test_json_file_storage_replaces_file_without_leftovers(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    storage = JsonFileStorage(path)
    storage.set(THEME_KEY, "nord")
    storage.set(TASKS_KEY, "[]")

    assert sorted(p.name for p in tmp_path.iterdir()) == ["storage.json"]
    assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "nord", TASKS_KEY: "[]"}


def test_json_file_storage_reads_path_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "from-env.json"
    monkeypatch.setenv(STORAGE_ENV_VAR, str(path))

    storage = JsonFileStorage()
    storage.set(THEME_KEY, "dracula")

    assert storage.path == path
    assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "dracula"}


def test_json_file_storage_logs_dropped_values(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({THEME_KEY: "nord", "count": 3}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="tasklist.persistence"):
        assert JsonFileStorage(path).get(THEME_KEY) == "nord"

    assert "count" in caplog.text
