from .data_model import Task, TaskFilter
from .formatter import TodoItemFormatter
from .persistence import JsonFileStorage, KeyValueStorage, MemoryStorage
from .task_store import TodoManager

__all__ = [
    "Task",
    "TaskFilter",
    "TodoItemFormatter",
    "TodoManager",
    "KeyValueStorage",
    "JsonFileStorage",
    "MemoryStorage",
]
