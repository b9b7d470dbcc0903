# tasklist/formatter.py

from typing import Optional

MAX_TASK_LENGTH = 14
ELLIPSIS = "..."
NO_DUE_DATE = "No due date"


class TodoItemFormatter:
    """Presentation rules for task text, due dates and completion status."""

    def format_task(self, task: str) -> str:
        """Truncate descriptions longer than 14 characters."""
        if len(task) > MAX_TASK_LENGTH:
            return task[:MAX_TASK_LENGTH] + ELLIPSIS
        return task

    def format_due_date(self, due_date: Optional[str]) -> str:
        return due_date or NO_DUE_DATE

    def format_status(self, completed: bool) -> str:
        return "Completed" if completed else "Pending"
