"""CLI state container."""

from ..app import App


class CLIState:
    """Application state container for CLI commands."""

    def __init__(self, app: App):
        self.app = app

    @property
    def settings(self):
        return self.app.settings
