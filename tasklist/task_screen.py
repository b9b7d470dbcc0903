# tasklist/task_screen.py

import logging
from typing import Optional
from textual.app import ComposeResult
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Label, Input

from .data_model import Task


class TaskScreenResult(Message):
    """Message containing the result of TaskScreen operations."""
    def __init__(
        self,
        cancelled: bool,
        task: str = "",
        due_date: str = "",
        task_id: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.cancelled = cancelled
        self.task = task
        self.due_date = due_date
        self.task_id = task_id


class TaskScreen(Screen):
    """Screen for adding a task or editing the description of an existing one."""
    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, todo: Optional[Task] = None):
        super().__init__()
        self._todo = todo

        self.task_input = Input(
            placeholder="Task (required)",
            select_on_focus=False,
            id="task-input",
        )
        self.date_input = Input(
            placeholder="Due date, e.g. 2023-12-31 (optional)",
            select_on_focus=False,
            id="date-input",
            disabled=todo is not None,
        )

        if todo:
            self.task_input.value = todo.task
            self.date_input.value = todo.due_date

        self.logger = logging.getLogger(__name__)

    def on_mount(self):
        """Called once the screen is mounted."""
        self.task_input.focus()

    def compose(self) -> ComposeResult:
        yield Label("Edit Task" if self._todo else "New Task")
        yield Label("Task:")
        yield self.task_input
        yield Label("Due date:")
        yield self.date_input

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_submit()

    def action_submit(self) -> None:
        """Validate the form and hand the result to the app."""
        task = self.task_input.value.strip()
        due_date = self.date_input.value.strip()

        if not task:
            self.logger.debug("Task text is required, submission aborted")
            self.notify("Please enter a task", severity="error")
            return

        self.app.post_message(TaskScreenResult(
            cancelled=False,
            task=task,
            due_date=due_date,
            task_id=self._todo.id if self._todo else None,
        ))
        self.app.pop_screen()

    def action_cancel(self) -> None:
        """Handle Escape key for canceling task add/edit."""
        self.logger.debug("Cancel action triggered")
        self.app.post_message(TaskScreenResult(cancelled=True))
        self.app.pop_screen()
