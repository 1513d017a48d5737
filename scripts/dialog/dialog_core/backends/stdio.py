"""Plain console backend used when no dialog tool is available."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.text import Text

from dialog_core.backends import Backend
from dialog_core.errors import DialogIOError
from dialog_core.formatting import parse_choice, strip_line_terminator, title_underline
from dialog_core.models import Choice

logger = logging.getLogger(__name__)


class Stdio(Backend):
    """Writes prompts to a console and reads one answer line per prompt.

    Password echo is only suppressed when the input stream is an interactive
    terminal. Redirected input is read as-is and a warning is logged.
    """

    name = "stdio"

    def __init__(self, console: Console | None = None, stdin: TextIO | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.stdin = stdin

    def _input_stream(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    def _write(self, text: str, end: str = "\n") -> None:
        self.console.print(Text(text), end=end, markup=False, highlight=False, soft_wrap=True)

    def _print_title(self, title: str | None) -> None:
        if title:
            self._write(title)
            self._write(title_underline(title))

    def _read_line(self) -> str:
        try:
            line = self._input_stream().readline()
        except OSError as exc:
            raise DialogIOError(f"could not read from input: {exc}") from exc
        if not line:
            raise DialogIOError("input closed before an answer was read")
        return strip_line_terminator(line)

    def _is_terminal(self) -> bool:
        isatty = getattr(self._input_stream(), "isatty", None)
        try:
            return bool(isatty and isatty())
        except (OSError, ValueError):
            return False

    def show_message(self, dialog) -> None:
        self._print_title(dialog.window_title)
        self._write(dialog.text)

    def show_input(self, dialog) -> str | None:
        self._print_title(dialog.window_title)
        if dialog.default_value is not None:
            self._write(f"{dialog.text} [default: {dialog.default_value}]: ", end="")
        else:
            self._write(f"{dialog.text}: ", end="")

        answer = self._read_line()
        if not answer and dialog.default_value is not None:
            return dialog.default_value
        return answer

    def show_password(self, dialog) -> str | None:
        self._print_title(dialog.window_title)
        prompt = f"{dialog.text}: "
        if self.stdin is None and self._is_terminal():
            try:
                return self.console.input(Text(prompt), password=True)
            except (EOFError, OSError) as exc:
                raise DialogIOError(f"could not read password: {exc}") from exc

        logger.warning("input is not an interactive terminal; password echo cannot be suppressed")
        self._write(prompt, end="")
        return self._read_line()

    def show_question(self, dialog) -> Choice:
        self._print_title(dialog.window_title)
        self._write(f"{dialog.text} [y/n]: ", end="")
        return parse_choice(self._read_line())
