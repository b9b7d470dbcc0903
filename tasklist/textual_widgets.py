# tasklist/textual_widgets.py

from textual.widgets import ListItem, Label
from typing import Optional

from .data_model import Task
from .formatter import TodoItemFormatter


class TaskItem(ListItem):
    """A ListItem representing a single task row in the ListView."""

    DEFAULT_CSS = """
    TaskItem > Label {
        text-style: bold;
    }

    TaskItem.-completed > Label {
        color: $text-muted;
        text-style: strike;
    }
    """

    def __init__(self, task: Task, formatter: TodoItemFormatter):
        self._todo = task
        self._formatter = formatter
        self._label = Label(self.render_text(), markup=False)
        super().__init__(self._label)
        if task.completed:
            self.add_class("-completed")

    def render_text(self) -> str:
        """Return the row text: description, due date and status columns."""
        fmt = self._formatter
        return (
            f"{fmt.format_task(self._todo.task):<17} "
            f"{fmt.format_due_date(self._todo.due_date):<12} "
            f"{fmt.format_status(self._todo.completed)}"
        )

    @property
    def todo(self) -> Task:
        return self._todo

    @property
    def task_id(self) -> str:
        return self._todo.id

    def update_content(self):
        """Update the displayed content if the task changes."""
        self._label.update(self.render_text())
        self.set_class(self._todo.completed, "-completed")


class EmptyItem(ListItem):
    """Placeholder row shown when the current view has no tasks."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(Label(message or "No task found"))

    @property
    def task_id(self) -> Optional[str]:
        return None
