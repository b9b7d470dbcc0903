# tasklist/task_store.py

import logging
import uuid
from typing import List, Optional, Tuple, Union

from .data_model import Task, TaskFilter
from .formatter import TodoItemFormatter
from .persistence import KeyValueStorage, load_tasks, save_tasks

logger = logging.getLogger(__name__)


class TodoManager:
    """Owns the task collection and keeps storage in step with it.

    Every mutating call writes the whole collection back to storage before
    returning. Lookups by an unknown id are silent no-ops.
    """

    def __init__(self, todo_item_formatter: TodoItemFormatter, storage: KeyValueStorage):
        self.todo_item_formatter = todo_item_formatter
        self.storage = storage
        self._todos: List[Task] = load_tasks(storage)
        logger.debug("TodoManager loaded %d tasks", len(self._todos))

    @property
    def todos(self) -> Tuple[Task, ...]:
        """Read-only snapshot of the collection, in insertion order."""
        return tuple(self._todos)

    def get_todo(self, todo_id: str) -> Optional[Task]:
        return next((t for t in self._todos if t.id == todo_id), None)

    def add_todo(self, task: str, due_date: Optional[str]) -> Task:
        """Create a task, append it, persist, and return it."""
        new_todo = Task(
            id=self.get_random_id(),
            task=self.todo_item_formatter.format_task(task),
            due_date=self.todo_item_formatter.format_due_date(due_date),
        )
        self._todos.append(new_todo)
        self.save()
        logger.debug("Added task %s", new_todo.id)
        return new_todo

    def edit_todo(self, todo_id: str, updated_task: str) -> Optional[Task]:
        """Replace the description of a task; returns None if the id is unknown."""
        todo = self.get_todo(todo_id)
        if todo is None:
            return None
        todo.task = self.todo_item_formatter.format_task(updated_task)
        self.save()
        logger.debug("Edited task %s", todo_id)
        return todo

    def delete_todo(self, todo_id: str) -> None:
        self._todos = [t for t in self._todos if t.id != todo_id]
        self.save()
        logger.debug("Deleted task %s", todo_id)

    def toggle_todo_status(self, todo_id: str) -> None:
        todo = self.get_todo(todo_id)
        if todo is None:
            return
        todo.completed = not todo.completed
        self.save()
        logger.debug("Toggled task %s to completed=%s", todo_id, todo.completed)

    def clear_all_todos(self) -> None:
        if not self._todos:
            return
        self._todos = []
        self.save()
        logger.debug("Cleared all tasks")

    def filter_todos(self, status: Union[TaskFilter, str]) -> List[Task]:
        """Return tasks matching ``all``, ``pending`` or ``completed``.

        Unknown criteria give an empty list.
        """
        if isinstance(status, TaskFilter):
            status = status.value
        if status == TaskFilter.ALL.value:
            return list(self._todos)
        if status == TaskFilter.PENDING.value:
            return [t for t in self._todos if not t.completed]
        if status == TaskFilter.COMPLETED.value:
            return [t for t in self._todos if t.completed]
        return []

    @staticmethod
    def get_random_id() -> str:
        return uuid.uuid4().hex

    def save(self) -> None:
        save_tasks(self.storage, self._todos)
