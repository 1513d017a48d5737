"""Backend base class and process helpers shared by the external-tool backends."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, Iterable

from dialog_core.errors import BackendFailed, BackendNotAvailable, DialogIOError, OutputDecodeError
from dialog_core.formatting import strip_line_terminator
from dialog_core.models import Choice, DialogBase

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CANCEL = 1

RENDER_METHODS = {
    "message": "show_message",
    "input": "show_input",
    "password": "show_password",
    "question": "show_question",
}


class Backend:
    """Renders a dialog box and returns its typed result.

    Subclasses implement one ``show_*`` method per dialog kind; ``render``
    picks the method from the dialog's ``kind`` tag.
    """

    name = ""

    def render(self, dialog: DialogBase):
        method = RENDER_METHODS.get(dialog.kind)
        if method is None:
            raise TypeError(f"unsupported dialog kind: {dialog.kind!r}")
        return getattr(self, method)(dialog)

    def show_message(self, dialog) -> None:
        raise NotImplementedError

    def show_input(self, dialog) -> str | None:
        raise NotImplementedError

    def show_password(self, dialog) -> str | None:
        raise NotImplementedError

    def show_question(self, dialog) -> Choice:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def is_available(program: str, which: Callable[[str], str | None] = shutil.which) -> bool:
    return which(program) is not None


def run_tool(argv: list[str], capture_stdout: bool = True) -> subprocess.CompletedProcess:
    """Run one tool invocation to completion; argv elements are never joined into a shell line."""
    program = argv[0]
    logger.debug("running %s", argv)
    try:
        proc = subprocess.run(
            argv,
            stdout=subprocess.PIPE if capture_stdout else None,
            stderr=subprocess.PIPE,
            check=False,
        )
    except FileNotFoundError as exc:
        raise BackendNotAvailable(program) from exc
    except OSError as exc:
        raise DialogIOError(f"could not run {program}: {exc}") from exc
    logger.debug("%s exited with status %s", program, proc.returncode)
    return proc


def decode_output(program: str, data: bytes | None) -> str:
    if not data:
        return ""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeError(program, str(exc)) from exc


def require_success(program: str, returncode: int, accepted: Iterable[int] = (EXIT_OK, EXIT_CANCEL)) -> None:
    if returncode not in tuple(accepted):
        raise BackendFailed(program, returncode)


def choice_from_status(program: str, returncode: int) -> Choice:
    if returncode == EXIT_OK:
        return Choice.YES
    if returncode == EXIT_CANCEL:
        return Choice.NO
    raise BackendFailed(program, returncode)


def text_from_output(program: str, returncode: int, data: bytes | None) -> str | None:
    if returncode == EXIT_OK:
        return strip_line_terminator(decode_output(program, data))
    if returncode == EXIT_CANCEL:
        return None
    raise BackendFailed(program, returncode)
