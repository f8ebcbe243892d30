"""Unit tests for transcript rendering."""

from datetime import datetime

import pytest_check as check

from henry.models.schemas import Message, Role
from henry.ui.render import WELCOME_HTML, format_message_content, render_message


class TestFormatMessageContent:
    """Tests for the limited chat markup."""

    def test_applies_all_substitutions(self) -> None:
        """Bold, italic, inline code and newlines are converted together."""
        content = "**bold** and *italic* and `code`\nnext line"

        assert format_message_content(content) == (
            "<strong>bold</strong> and <em>italic</em> and <code>code</code><br>next line"
        )

    def test_plain_text_unchanged(self) -> None:
        """Text without markup passes through."""
        assert format_message_content("hello there") == "hello there"

    def test_escapes_html_before_markup(self) -> None:
        """Raw HTML in content is escaped, not rendered."""
        result = format_message_content("<script>alert(1)</script> & **x**")

        check.equal(
            result, "&lt;script&gt;alert(1)&lt;/script&gt; &amp; <strong>x</strong>"
        )
        check.is_not_in("<script>", result)

    def test_bold_runs_before_italic(self) -> None:
        """Double asterisks are never read as two italic markers."""
        assert format_message_content("**a** *b*") == "<strong>a</strong> <em>b</em>"

    def test_matches_are_non_greedy(self) -> None:
        """Each delimiter pair closes at the nearest match."""
        assert format_message_content("`a` and `b`") == "<code>a</code> and <code>b</code>"

    def test_markup_does_not_span_lines(self) -> None:
        """A delimiter pair split across lines is left alone."""
        assert format_message_content("*start\nend*") == "*start<br>end*"

    def test_multiple_newlines(self) -> None:
        assert format_message_content("a\n\nb") == "a<br><br>b"


class TestRenderMessage:
    """Tests for role-tagged message blocks."""

    def test_user_message_tagged_by_role(self) -> None:
        message = Message(
            role=Role.USER, content="hi", timestamp=datetime(2024, 5, 1, 14, 30)
        )

        html = render_message(message)

        check.is_in('class="message message-user"', html)
        check.is_in('<div class="message-content">hi</div>', html)
        check.is_in("02:30 PM", html)

    def test_assistant_message_content_formatted(self) -> None:
        message = Message(role=Role.ASSISTANT, content="**done**")

        html = render_message(message)

        check.is_in("message-assistant", html)
        check.is_in("<strong>done</strong>", html)

    def test_welcome_block_marked(self) -> None:
        assert 'class="welcome-message"' in WELCOME_HTML
