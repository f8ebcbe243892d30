"""Transcript rendering: message markup to HTML fragments.

Rendering is a pure projection of a Message. The page appends one fragment
per message and never re-renders earlier ones.
"""

import re
from datetime import datetime

from henry.models.schemas import Message

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_INLINE_CODE = re.compile(r"`(.*?)`")

WELCOME_HTML = """
<div class="welcome-message">
    <h3>Welcome to Henry AI</h3>
    <p>Your intelligent desktop assistant with file system access, terminal capabilities, and app integration.</p>
    <p>Use the sidebar to access different features, or simply start typing to chat with me.</p>
</div>
"""


def escape_html(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def format_message_content(content: str) -> str:
    """Convert the limited chat markup to HTML.

    Supports: bold, italic, inline code, line breaks. Substitutions run in
    that order on already-escaped text.
    """
    text = escape_html(content)
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _ITALIC.sub(r"<em>\1</em>", text)
    text = _INLINE_CODE.sub(r"<code>\1</code>", text)
    return text.replace("\n", "<br>")


def format_time(timestamp: datetime) -> str:
    return timestamp.strftime("%I:%M %p")


def render_message(message: Message) -> str:
    """Render one message as a role-tagged HTML block."""
    return (
        f'<div class="message message-{message.role.value}">'
        f'<div class="message-content">{format_message_content(message.content)}</div>'
        f'<div class="message-time">{format_time(message.timestamp)}</div>'
        "</div>"
    )
