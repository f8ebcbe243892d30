"""NiceGUI chat interface with the assistant sidebar."""

import logging

from nicegui import ui

from henry.backend.base import BackendAdapter
from henry.backend.mock import MockBackend
from henry.models.schemas import Message, UsageStats
from henry.session.controller import DEFAULT_TITLE, STATUS_READY, SessionController
from henry.storage.conversations import ConversationLog
from henry.storage.stats import StatsTracker
from henry.storage.store import KeyValueStore, NiceGUIStore
from henry.ui.actions import AUTOMATIONS, FILE_ACTIONS, SidebarActions
from henry.ui.catalog import ALL_CATEGORIES, CATEGORIES, filter_apps
from henry.ui.render import WELCOME_HTML, render_message

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message { display: flex; flex-direction: column; max-width: 70%; gap: 2px; }
    .message-user { align-self: flex-end; align-items: flex-end; }
    .message-assistant { align-self: flex-start; align-items: flex-start; }

    .message-content { padding: 0.75rem 1rem; font-size: 0.875rem; line-height: 1.5; }
    .message-user .message-content {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 18px 4px 18px;
    }
    .message-assistant .message-content {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }
    .message-time { font-size: 10px; color: #9ca3af; }

    .message-content strong { font-weight: 600; }
    .message-content em { font-style: italic; }
    .message-content code {
        font-family: 'Menlo', 'Monaco', monospace;
        background: rgba(0, 0, 0, 0.08);
        padding: 0 0.3rem;
        border-radius: 4px;
    }

    .welcome-message { text-align: center; color: #6b7280; padding: 4rem 1rem; }
    .welcome-message h3 { font-size: 1.25rem; font-weight: 600; color: #374151; }

    .terminal-log {
        background: #111827;
        color: #10b981;
        font-family: 'Menlo', 'Monaco', monospace;
        font-size: 0.75rem;
        border-radius: 8px;
    }

    .app-status { width: 8px; height: 8px; border-radius: 50%; background: #d1d5db; }
    .app-status.connected { background: #10b981; }

    .send-btn { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%) !important; }
</style>
"""

# Set once at startup by configure(); shared by every client page.
_backend: BackendAdapter | None = None
_store: KeyValueStore | None = None


def configure(backend: BackendAdapter, store: KeyValueStore) -> None:
    """Install the backend and storage used by all chat pages."""
    global _backend, _store
    _backend = backend
    _store = store
    logger.info(f"Chat page configured with {backend.name} backend")


def _get_backend() -> BackendAdapter:
    global _backend
    if _backend is None:
        _backend = MockBackend()
    return _backend


def _get_store() -> KeyValueStore:
    global _store
    if _store is None:
        _store = NiceGUIStore()
    return _store


class NiceGUIChatView:
    """ChatView that drives the NiceGUI elements of one page."""

    def __init__(
        self,
        messages_container: ui.column,
        scroll_area: ui.scroll_area,
        input_field: ui.textarea,
        send_btn: ui.button,
        status_label: ui.label,
        title_label: ui.label,
        stat_labels: dict[str, ui.label],
    ) -> None:
        self._messages_container = messages_container
        self._scroll_area = scroll_area
        self._input_field = input_field
        self._send_btn = send_btn
        self._status_label = status_label
        self._title_label = title_label
        self._stat_labels = stat_labels
        self._welcome: ui.html | None = None

    def set_loading(self, loading: bool) -> None:
        if loading:
            self._send_btn.props("loading")
            self._send_btn.disable()
        else:
            self._send_btn.props(remove="loading")
            self._send_btn.enable()

    def set_status(self, text: str) -> None:
        self._status_label.set_text(text)

    def append_message(self, message: Message) -> None:
        if self._welcome is not None:
            self._welcome.delete()
            self._welcome = None
        with self._messages_container:
            ui.html(render_message(message), sanitize=False).classes("w-full flex flex-col")
        self._scroll_area.scroll_to(percent=1.0)

    def show_welcome(self) -> None:
        self._messages_container.clear()
        with self._messages_container:
            self._welcome = ui.html(WELCOME_HTML, sanitize=False).classes("w-full")

    def clear_input(self) -> None:
        self._input_field.value = ""

    def show_error(self, text: str) -> None:
        ui.notify(text, type="negative")

    def set_title(self, title: str) -> None:
        self._title_label.set_text(title)

    def update_stats(self, stats: UsageStats) -> None:
        for field, label in self._stat_labels.items():
            label.set_text(str(getattr(stats, field)))


@ui.page("/")
def chat_page() -> None:
    """Main assistant page."""
    ui.add_head_html(CUSTOM_CSS)

    store = _get_store()
    stats = StatsTracker(store)
    conversations = ConversationLog(store)
    controller = SessionController(_get_backend(), stats, conversations)

    stat_labels: dict[str, ui.label] = {}

    def notify(message: str, kind: str) -> None:
        ui.notify(message, type=kind)

    def on_stats(updated: UsageStats) -> None:
        controller.view.update_stats(updated)

    actions = SidebarActions(stats, notify=notify, on_stats=on_stats)

    # === Sidebar ===
    with ui.left_drawer(value=True, bordered=True).props("width=280").classes(
        "bg-white p-3 gap-2"
    ) as drawer:
        with ui.row().classes("w-full gap-2"):
            ui.button("New Chat", icon="add", on_click=lambda: controller.new_chat()).props(
                "unelevated"
            ).classes("flex-grow")
            ui.button(icon="delete_sweep", on_click=lambda: controller.clear_chat()).props(
                "flat round"
            ).tooltip("Clear chat")

        with ui.expansion("Files", icon="folder", value=True).classes("w-full"):
            for action, label in FILE_ACTIONS.items():
                ui.button(
                    label, on_click=lambda a=action: actions.dispatch(f"file:{a}")
                ).props("flat dense no-caps align=left").classes("w-full")

        with ui.expansion("Terminal", icon="terminal", value=True).classes("w-full"):
            terminal_log = ui.column().classes("terminal-log w-full p-2 gap-0 min-h-[3rem]")

            def run_command() -> None:
                line = actions.run_terminal_command(terminal_input.value or "")
                if line is None:
                    return
                with terminal_log:
                    ui.label(line)
                terminal_input.value = ""

            terminal_input = (
                ui.input(placeholder="Enter command...")
                .props("dense outlined")
                .classes("w-full")
                .on("keydown.enter", run_command)
            )

        with ui.expansion("Apps", icon="apps", value=True).classes("w-full"):
            apps_list = ui.column().classes("w-full gap-1")

            def display_apps(category: str = ALL_CATEGORIES) -> None:
                apps_list.clear()
                with apps_list:
                    for app in filter_apps(category):
                        with ui.row().classes(
                            "w-full items-center gap-2 cursor-pointer px-2 py-1 rounded hover:bg-gray-100"
                        ).on("click", lambda a=app.id: actions.dispatch(f"app:{a}")):
                            ui.label(app.icon)
                            ui.label(app.name).classes("flex-grow text-sm")
                            status_classes = "app-status connected" if app.connected else "app-status"
                            ui.element("div").classes(status_classes)

            ui.toggle(
                CATEGORIES, value=ALL_CATEGORIES, on_change=lambda e: display_apps(e.value)
            ).props("dense no-caps size=sm").classes("w-full")
            display_apps()

        with ui.expansion("Automations", icon="bolt", value=True).classes("w-full"):
            for name, label in AUTOMATIONS.items():
                ui.button(
                    label, on_click=lambda n=name: actions.dispatch(f"automation:{n}")
                ).props("flat dense no-caps align=left").classes("w-full")

        with ui.expansion("Stats", icon="insights", value=True).classes("w-full"):
            with ui.grid(columns=2).classes("w-full text-sm"):
                for field, label in (
                    ("tasks_today", "Tasks today"),
                    ("files_processed", "Files processed"),
                    ("commands_run", "Commands run"),
                ):
                    ui.label(label).classes("text-gray-500")
                    stat_labels[field] = ui.label("0").classes("font-semibold text-right")

    # === Header ===
    with ui.header().classes("header items-center justify-between px-4 py-2"):
        with ui.row().classes("items-center gap-3"):
            ui.button(icon="menu", on_click=drawer.toggle).props("flat round color=white")
            title_label = ui.label(DEFAULT_TITLE).classes("text-lg font-semibold text-white")
        with ui.row().classes("items-center gap-2"):
            ui.icon("circle").classes("text-green-300 text-xs")
            status_label = ui.label(STATUS_READY).classes("text-sm text-white/80")

    # === Messages ===
    with ui.column().classes("w-full max-w-3xl mx-auto").style("height: calc(100vh - 8rem)"):
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50 rounded-lg") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")

        # === Input ===
        with ui.row().classes("w-full p-2 gap-3 items-end"):

            async def send_message() -> None:
                await controller.send_message(input_field.value or "")

            input_field = (
                ui.textarea(placeholder="Ask Henry anything...")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            send_btn = (
                ui.button(icon="send", on_click=send_message)
                .props("round unelevated")
                .classes("send-btn")
            )

    controller.view = NiceGUIChatView(
        messages_container=messages_container,
        scroll_area=scroll_area,
        input_field=input_field,
        send_btn=send_btn,
        status_label=status_label,
        title_label=title_label,
        stat_labels=stat_labels,
    )
    controller.view.show_welcome()
    controller.view.update_stats(stats.load())
