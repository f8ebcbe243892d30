"""Sidebar actions dispatched by string tag.

Tags look like ``file:<action>``, ``automation:<name>`` or ``app:<id>``.
Terminal input is handled separately: commands are echoed into the
terminal log and counted.
"""

import logging
from collections.abc import Callable

from henry.models.schemas import UsageStats
from henry.storage.stats import StatsTracker
from henry.ui.catalog import find_app

logger = logging.getLogger(__name__)

FILE_ACTIONS: dict[str, str] = {
    "browse": "Browse Files",
    "open": "Open File",
    "organize": "Organize Desktop",
}

AUTOMATIONS: dict[str, str] = {
    "backup": "Backup Files",
    "cleanup": "Clean Downloads",
    "sync": "Sync Folders",
}

Notifier = Callable[[str, str], None]
StatsListener = Callable[[UsageStats], None]


def _noop_notify(message: str, kind: str) -> None:
    pass


def _noop_stats(stats: UsageStats) -> None:
    pass


class SidebarActions:
    """Handlers behind the sidebar buttons and the terminal input."""

    def __init__(
        self,
        stats: StatsTracker,
        notify: Notifier = _noop_notify,
        on_stats: StatsListener = _noop_stats,
    ) -> None:
        self._stats = stats
        self._notify = notify
        self._on_stats = on_stats
        self.terminal_lines: list[str] = []

    def dispatch(self, tag: str) -> bool:
        """Route a sidebar tag to its handler.

        Returns:
            True if the tag named a known action.
        """
        kind, _, name = tag.partition(":")
        if kind == "file":
            return self.run_file_action(name)
        if kind == "automation":
            return self.run_automation(name)
        if kind == "app":
            return self.open_app(name)
        return self._unknown(tag)

    def run_file_action(self, action: str) -> bool:
        label = FILE_ACTIONS.get(action)
        if label is None:
            return self._unknown(f"file:{action}")
        logger.info(f"File action: {action}")
        self._on_stats(self._stats.increment("files_processed"))
        self._notify(f"{label} started", "info")
        return True

    def run_automation(self, name: str) -> bool:
        label = AUTOMATIONS.get(name)
        if label is None:
            return self._unknown(f"automation:{name}")
        logger.info(f"Automation: {name}")
        self._on_stats(self._stats.increment("tasks_today"))
        self._notify(f"{label} automation started", "positive")
        return True

    def open_app(self, app_id: str) -> bool:
        app = find_app(app_id)
        if app is None:
            return self._unknown(f"app:{app_id}")
        state = "connected" if app.connected else "not connected"
        self._notify(f"{app.name} is {state}", "info")
        return True

    def run_terminal_command(self, command: str) -> str | None:
        """Echo a terminal command into the log.

        Returns:
            The echoed line, or None for blank input.
        """
        command = command.strip()
        if not command:
            return None
        line = f"$ {command}"
        self.terminal_lines.append(line)
        self._on_stats(self._stats.increment("commands_run"))
        return line

    def _unknown(self, tag: str) -> bool:
        logger.warning(f"Unknown sidebar action: {tag}")
        self._notify(f"Action not available: {tag}", "warning")
        return False
