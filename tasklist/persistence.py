# tasklist/persistence.py

import os
import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union

from .data_model import Task

STORAGE_FILE = "storage.json"
STORAGE_ENV_VAR = "TASKLIST_STORAGE"
TASKS_KEY = "todos"
THEME_KEY = "theme"

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Durable string key-value store shared by the task store and the theme switcher."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Dict-backed storage; contents vanish with the process."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStorage:
    """Keeps every key in one JSON object file.

    A missing file is an empty store. A corrupt file is treated as empty
    and gets replaced on the next write.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        if path is None:
            path = os.environ.get(STORAGE_ENV_VAR, STORAGE_FILE)
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable storage file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, ignoring it", self.path)
            return {}
        dropped = sorted(k for k, v in data.items() if not isinstance(v, str))
        if dropped:
            logger.warning("Dropping non-string values in %s for keys %s", self.path, dropped)
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, suffix=".tmp", delete=False
        ) as f:
            try:
                json.dump(data, f, indent=2)
            except Exception:
                f.close()
                os.unlink(f.name)
                raise
        os.replace(f.name, self.path)


def load_tasks(storage: KeyValueStorage) -> List[Task]:
    """Load tasks from storage; anything unusable counts as no tasks."""
    raw = storage.get(TASKS_KEY)
    if not raw:
        return []
    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise TypeError(f"expected a list, got {type(data).__name__}")
        tasks = [Task.from_dict(item) for item in data]
        if len({t.id for t in tasks}) != len(tasks):
            raise ValueError("duplicate task ids")
        return tasks
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("Ignoring malformed task data under %r: %s", TASKS_KEY, exc)
        return []


def save_tasks(storage: KeyValueStorage, tasks: List[Task]):
    """Persist the whole task collection under TASKS_KEY."""
    data = [t.to_dict() for t in tasks]
    storage.set(TASKS_KEY, json.dumps(data))
