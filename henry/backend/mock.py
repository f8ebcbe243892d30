"""Deterministic reply generator used when no backend bridge is available."""

import uuid

from henry.models.schemas import ChatResponse

FILE_REPLY = (
    "I can help you with file operations! I have access to your Desktop, "
    "Documents, and Downloads folders. What would you like me to do with your files?"
)
TERMINAL_REPLY = "I can execute terminal commands for you. What command would you like me to run?"
AUTOMATION_REPLY = (
    "I can set up automation workflows for you. What task would you like me to automate?"
)
APP_REPLY = "I can help you connect and manage your apps. Which app would you like to integrate?"
GENERIC_REPLY = (
    'I understand you\'re asking about: "{message}". As your AI assistant, I can help '
    "you with file operations, terminal commands, app integrations, and automation "
    "tasks. How can I assist you today?"
)

# Checked in order, first match wins.
KEYWORD_REPLIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("file", "folder"), FILE_REPLY),
    (("terminal", "command"), TERMINAL_REPLY),
    (("automate", "automation"), AUTOMATION_REPLY),
    (("app", "connect"), APP_REPLY),
)


def generate_mock_reply(message: str) -> str:
    """Pick a canned reply by case-insensitive keyword match.

    Args:
        message: The user's message.

    Returns:
        The reply for the first matching keyword group, or the generic
        reply with the message embedded verbatim.
    """
    lowered = message.lower()
    for keywords, reply in KEYWORD_REPLIES:
        if any(keyword in lowered for keyword in keywords):
            return reply
    return GENERIC_REPLY.format(message=message)


class MockBackend:
    """Backend variant that never fails and needs no host bridge."""

    name = "mock"

    async def send(self, message: str, session_id: str | None) -> ChatResponse:
        return ChatResponse(
            response=generate_mock_reply(message),
            session_id=session_id or uuid.uuid4().hex,
        )
