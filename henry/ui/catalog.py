"""Connected-app catalog shown in the sidebar."""

from pydantic import BaseModel


class ConnectedApp(BaseModel):
    """An app integration listed in the sidebar.

    Attributes:
        id: Stable identifier used as the click tag.
        name: Display name.
        icon: Emoji shown next to the name.
        category: Category id used for filtering.
        connected: Whether the integration is currently connected.
    """

    id: str
    name: str
    icon: str
    category: str
    connected: bool


ALL_CATEGORIES = "all"

CATEGORIES: dict[str, str] = {
    ALL_CATEGORIES: "All",
    "productivity": "Productivity",
    "development": "Development",
    "communication": "Communication",
}

APPS: tuple[ConnectedApp, ...] = (
    ConnectedApp(id="notion", name="Notion", icon="📝", category="productivity", connected=True),
    ConnectedApp(
        id="google-drive", name="Google Drive", icon="📁", category="productivity", connected=True
    ),
    ConnectedApp(id="github", name="GitHub", icon="🐙", category="development", connected=True),
    ConnectedApp(id="vscode", name="VS Code", icon="💻", category="development", connected=True),
    ConnectedApp(id="slack", name="Slack", icon="💬", category="communication", connected=False),
    ConnectedApp(id="email", name="Email", icon="📧", category="communication", connected=True),
)


def filter_apps(category: str = ALL_CATEGORIES) -> list[ConnectedApp]:
    """Return the apps in a category, in catalog order.

    Unknown categories yield an empty list.
    """
    if category == ALL_CATEGORIES:
        return list(APPS)
    return [app for app in APPS if app.category == category]


def find_app(app_id: str) -> ConnectedApp | None:
    return next((app for app in APPS if app.id == app_id), None)
