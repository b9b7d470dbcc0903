# tests/conftest.py

from __future__ import annotations

import pytest

from tasklist.formatter import TodoItemFormatter
from tasklist.task_store import TodoManager

from .fakes import RecordingStorage


@pytest.fixture()
def formatter() -> TodoItemFormatter:
    return TodoItemFormatter()


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def manager(formatter: TodoItemFormatter, storage: RecordingStorage) -> TodoManager:
    return TodoManager(formatter, storage)
