# tasklist/data_model.py

from dataclasses import dataclass
from enum import Enum


class TaskFilter(Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Task:
    """Represents a single task in the todo list.

    ``completed`` is the authoritative completion flag. ``status`` is kept
    only so stored data keeps its shape; it is written once at creation.
    """
    id: str
    task: str
    due_date: str
    completed: bool = False
    status: str = "pending"

    def to_dict(self):
        """Convert Task to a dictionary for JSON serialization."""
        return {
            "id": self.id,
            "task": self.task,
            "dueDate": self.due_date,
            "completed": self.completed,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create Task from a dictionary (JSON deserialization)."""
        if not isinstance(data["id"], str) or not isinstance(data["task"], str):
            raise TypeError("task id and text must be strings")
        if not isinstance(data["completed"], bool):
            raise TypeError("completed must be a boolean")
        if not isinstance(data["dueDate"], str):
            raise TypeError("dueDate must be a string")
        status = data.get("status", "pending")
        if not isinstance(status, str):
            raise TypeError("status must be a string")

        return cls(
            id=data["id"],
            task=data["task"],
            due_date=data["dueDate"],
            completed=data["completed"],
            status=status,
        )

    def __repr__(self):
        return f"Task(id={self.id}, task={self.task}, completed={self.completed})"
