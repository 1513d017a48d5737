"""Text helpers for tool arguments, tool output and console answers."""

from __future__ import annotations

from dialog_core.models import Choice

MARKUP_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def strip_line_terminator(value: str) -> str:
    """Remove exactly one trailing ``\\r\\n`` or ``\\n``."""
    if value.endswith("\r\n"):
        return value[:-2]
    if value.endswith("\n"):
        return value[:-1]
    return value


def escape_markup(value: str) -> str:
    # "&" first so already-produced entities are not escaped twice.
    text = value.replace("&", MARKUP_ESCAPES["&"])
    for char in ("<", ">", '"', "'"):
        text = text.replace(char, MARKUP_ESCAPES[char])
    return text


def parse_choice(answer: str | None) -> Choice:
    if not answer:
        return Choice.NO
    if answer.strip().lower().startswith("y"):
        return Choice.YES
    return Choice.NO


def title_underline(title: str) -> str:
    return "=" * len(title)
