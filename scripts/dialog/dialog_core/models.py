"""Shared model contracts for dialog boxes and their results."""

from __future__ import annotations

from enum import Enum


class Choice(Enum):
    YES = "yes"
    NO = "no"


class DialogBase:
    """Prompt text plus an optional title, configured through chainable setters.

    Setters never validate and the last call wins. Backends read the plain
    attributes ``text`` and ``window_title``.
    """

    kind = ""

    def __init__(self, text: str) -> None:
        self.text = text
        self.window_title: str | None = None

    def title(self, title: str):
        self.window_title = title
        return self

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "text": self.text,
            "title": self.window_title,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r}, title={self.window_title!r})"
