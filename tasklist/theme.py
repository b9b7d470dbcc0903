# tasklist/theme.py

import logging
from typing import Optional, Sequence

from textual.app import App

from .persistence import KeyValueStorage, THEME_KEY

DEFAULT_THEMES = (
    "textual-dark",
    "textual-light",
    "nord",
    "gruvbox",
    "dracula",
    "tokyo-night",
)


class ThemeSwitcher:
    """Applies the selected Textual theme and remembers it in storage."""

    def __init__(self, app: App, storage: KeyValueStorage, themes: Sequence[str] = DEFAULT_THEMES):
        self.app = app
        self.storage = storage
        self.themes = [name for name in themes if name in app.available_themes]
        self.logger = logging.getLogger(__name__)

    def init(self) -> None:
        """Apply the saved theme, if any."""
        theme = self.get_saved_theme()
        if theme:
            self.set_theme(theme)

    def set_theme(self, theme_name: str) -> bool:
        if theme_name not in self.app.available_themes:
            self.logger.warning("Unknown theme %r ignored", theme_name)
            return False
        self.app.theme = theme_name
        return True

    def save_theme(self, theme_name: str) -> None:
        self.storage.set(THEME_KEY, theme_name)

    def get_saved_theme(self) -> Optional[str]:
        return self.storage.get(THEME_KEY)

    def select(self, theme_name: str) -> None:
        if self.set_theme(theme_name):
            self.save_theme(theme_name)

    def next_theme(self) -> Optional[str]:
        """Switch to the theme after the current one and persist the choice."""
        if not self.themes:
            return None
        try:
            idx = self.themes.index(self.app.theme)
        except ValueError:
            idx = -1
        theme_name = self.themes[(idx + 1) % len(self.themes)]
        self.select(theme_name)
        return theme_name
