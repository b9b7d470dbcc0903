# tasklist/todo_app.py

import logging
import datetime
from typing import Optional

from textual.app import App, ComposeResult
from textual.widgets import ListView, Label
from textual.containers import Container
from textual import events

from .data_model import TaskFilter
from .formatter import TodoItemFormatter
from .persistence import KeyValueStorage, JsonFileStorage
from .task_store import TodoManager
from .textual_widgets import TaskItem, EmptyItem
from .task_screen import TaskScreen, TaskScreenResult
from .theme import ThemeSwitcher

FILTER_KEYS = {
    "1": TaskFilter.ALL,
    "2": TaskFilter.PENDING,
    "3": TaskFilter.COMPLETED,
}


class TodoApp(App):
    """Main TUI Application."""
    CSS = """
    ListView {
        width: 100%;
        height: 100%;
    }

    #header {
        dock: top;
        text-style: bold;
        padding: 0 1 1 1;
        width: 100%;
        height: 2;
    }
    """

    list_view: Optional[ListView] = None

    def __init__(self, storage: Optional[KeyValueStorage] = None):
        super().__init__()
        self.logger = logging.getLogger(__name__)

        self.storage = storage if storage is not None else JsonFileStorage()
        self.todo_item_formatter = TodoItemFormatter()
        self.todo_manager = TodoManager(self.todo_item_formatter, self.storage)
        self.theme_switcher = ThemeSwitcher(self, self.storage)
        self.current_filter = TaskFilter.ALL
        self.logger.debug("TodoApp initialized")

    def compose(self) -> ComposeResult:
        yield Label(self.header_text(), id="header")
        with Container():
            yield ListView()

    def header_text(self) -> str:
        current_date = datetime.datetime.now().strftime("%d.%m.%Y")
        return f"Todo List - {self.current_filter.value.capitalize()} ({current_date})"

    async def on_mount(self) -> None:
        """Called once the app is fully loaded."""
        self.theme_switcher.init()
        self.list_view = self.query_one(ListView)
        await self.update_list_view()

    async def update_list_view(self, target_index: int = 0) -> None:
        """Rebuild the list view from the current filter."""
        if self.list_view is None:
            return

        self.query_one("#header", Label).update(self.header_text())
        todos = self.todo_manager.filter_todos(self.current_filter)
        await self.list_view.clear()
        if todos:
            await self.list_view.extend(
                TaskItem(todo, self.todo_item_formatter) for todo in todos
            )
            self.list_view.index = max(0, min(target_index, len(todos) - 1))
        else:
            await self.list_view.append(EmptyItem())
        self.list_view.focus()

    def get_selected_index(self) -> int:
        """Return the currently selected row index or -1 if none."""
        if self.list_view is None or self.list_view.index is None:
            return -1
        return self.list_view.index

    def get_selected_id(self) -> Optional[str]:
        if self.list_view is None:
            return None
        item = self.list_view.highlighted_child
        if isinstance(item, TaskItem):
            return item.task_id
        return None

    def show_alert_message(self, message: str, severity: str = "information") -> None:
        self.logger.info(message)
        self.notify(message, severity=severity, timeout=3)

    async def on_key(self, event: events.Key) -> None:
        """Handle key events for the main application."""
        if isinstance(self.screen, TaskScreen):
            return

        if event.key == "a":
            await self.push_screen(TaskScreen())
        elif event.key == "e":
            await self.open_edit_screen()
        elif event.key == "space":
            await self.handle_toggle_status()
        elif event.key == "d":
            await self.handle_delete_todo()
        elif event.key in ("D", "shift+d"):
            await self.handle_clear_all_todos()
        elif event.key in FILTER_KEYS:
            await self.handle_filter_todos(FILTER_KEYS[event.key])
        elif event.key == "f":
            members = list(TaskFilter)
            next_filter = members[(members.index(self.current_filter) + 1) % len(members)]
            await self.handle_filter_todos(next_filter)
        elif event.key == "t":
            theme_name = self.theme_switcher.next_theme()
            if theme_name:
                self.show_alert_message(f"Theme: {theme_name}")
        elif event.key == "j":
            if self.list_view is not None:
                self.list_view.action_cursor_down()
        elif event.key == "k":
            if self.list_view is not None:
                self.list_view.action_cursor_up()
        elif event.key in ("q", "escape"):
            self.exit()

    async def on_list_view_selected(self, message: ListView.Selected) -> None:
        await self.open_edit_screen()

    async def open_edit_screen(self) -> None:
        todo_id = self.get_selected_id()
        if todo_id is None:
            return
        todo = self.todo_manager.get_todo(todo_id)
        if todo is not None:
            await self.push_screen(TaskScreen(todo))

    async def on_task_screen_result(self, message: TaskScreenResult) -> None:
        """Apply the add/edit form result through the todo manager."""
        if message.cancelled:
            return

        if message.task_id is not None:
            updated = self.todo_manager.edit_todo(message.task_id, message.task)
            if updated is None:
                self.show_alert_message("Task no longer exists", "error")
                return
            await self.update_list_view(self.get_selected_index())
            self.show_alert_message("Todo updated successfully")
        else:
            self.todo_manager.add_todo(message.task, message.due_date)
            await self.update_list_view(len(self.todo_manager.todos) - 1)
            self.show_alert_message("Task added successfully")

    async def handle_toggle_status(self) -> None:
        todo_id = self.get_selected_id()
        if todo_id is None:
            return
        idx = self.get_selected_index()
        self.todo_manager.toggle_todo_status(todo_id)
        await self.update_list_view(idx)

    async def handle_delete_todo(self) -> None:
        todo_id = self.get_selected_id()
        if todo_id is None:
            return
        idx = self.get_selected_index()
        self.todo_manager.delete_todo(todo_id)
        await self.update_list_view(idx)
        self.show_alert_message("Todo deleted successfully")

    async def handle_clear_all_todos(self) -> None:
        self.todo_manager.clear_all_todos()
        await self.update_list_view()
        self.show_alert_message("All todos cleared successfully")

    async def handle_filter_todos(self, status: TaskFilter) -> None:
        self.current_filter = status
        await self.update_list_view()
