"""Native dialog boxes through dialog, zenity, kdialog or the console."""

from __future__ import annotations

from dialog_core.backends import Backend
from dialog_core.backends.dialog import Dialog
from dialog_core.backends.kdialog import KDialog
from dialog_core.backends.stdio import Stdio
from dialog_core.backends.zenity import Zenity
from dialog_core.dialogs import DialogBox, Input, Message, Password, Question
from dialog_core.errors import (
    BackendFailed,
    BackendNotAvailable,
    DialogError,
    DialogIOError,
    OutputDecodeError,
)
from dialog_core.models import Choice
from dialog_core.selection import backend_by_name, default_backend

__all__ = [
    "Backend",
    "BackendFailed",
    "BackendNotAvailable",
    "Choice",
    "Dialog",
    "DialogBox",
    "DialogError",
    "DialogIOError",
    "Input",
    "KDialog",
    "Message",
    "OutputDecodeError",
    "Password",
    "Question",
    "Stdio",
    "Zenity",
    "backend_by_name",
    "default_backend",
]
