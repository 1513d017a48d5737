"""Dialog box kinds and the show/show_with entry points."""

from __future__ import annotations

from dialog_core.backends import Backend
from dialog_core.models import Choice, DialogBase
from dialog_core.selection import default_backend


class DialogBox(DialogBase):
    def show(self):
        """Show this dialog with the backend picked for the current host."""
        return self.show_with(default_backend())

    def show_with(self, backend: Backend):
        return backend.render(self)


class Message(DialogBox):
    """A text with a single OK button. ``show`` returns ``None``."""

    kind = "message"

    def show(self) -> None:
        return super().show()


class Input(DialogBox):
    """A text entry. ``show`` returns the answer, or ``None`` when cancelled."""

    kind = "input"

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.default_value: str | None = None

    def default(self, default: str) -> Input:
        self.default_value = default
        return self

    def show(self) -> str | None:
        return super().show()

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["default"] = self.default_value
        return payload


class Password(DialogBox):
    """Like ``Input`` but without a default and with the answer hidden where the backend can."""

    kind = "password"

    def show(self) -> str | None:
        return super().show()


class Question(DialogBox):
    kind = "question"

    def show(self) -> Choice:
        return super().show()


DIALOG_KINDS = {
    "message": Message,
    "input": Input,
    "password": Password,
    "question": Question,
}
