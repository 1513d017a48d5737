"""GTK ``zenity`` backend."""

from __future__ import annotations

import logging
import re

from dialog_core.backends import (
    EXIT_CANCEL,
    EXIT_OK,
    Backend,
    choice_from_status,
    require_success,
    run_tool,
    text_from_output,
)
from dialog_core.formatting import escape_markup
from dialog_core.models import Choice

logger = logging.getLogger(__name__)

PROGRAM = "zenity"
EXIT_TIMEOUT = 5

# GTK/GLib diagnostics, e.g. "(zenity:1234): Gtk-WARNING **: ..." or "Gtk-Message: ..."
TOOLKIT_NOISE_RE = re.compile(rb"^(\(zenity:\d+\): |(Gtk|Gdk|GLib)-)")


def strip_toolkit_noise(data: bytes) -> bytes:
    lines = data.splitlines(keepends=True)
    return b"".join(line for line in lines if not TOOLKIT_NOISE_RE.match(line))


class Zenity(Backend):
    name = "zenity"

    def __init__(
        self,
        icon: str | None = None,
        width: int | None = None,
        height: int | None = None,
        timeout: int | None = None,
    ) -> None:
        self.icon = icon
        self.width = width
        self.height = height
        self.timeout = timeout

    def set_icon(self, icon: str) -> None:
        self.icon = icon

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def set_timeout(self, timeout: int) -> None:
        self.timeout = timeout

    def build_args(self, box_args: list[str], title: str | None) -> list[str]:
        cmd = [PROGRAM]
        if self.icon is not None:
            cmd.extend(["--window-icon", self.icon])
        if self.width is not None:
            cmd.extend(["--width", str(self.width)])
        if self.height is not None:
            cmd.extend(["--height", str(self.height)])
        if self.timeout is not None:
            cmd.extend(["--timeout", str(self.timeout)])
        if title is not None:
            cmd.extend(["--title", title])
        cmd.extend(box_args)
        return cmd

    def _execute(self, box_args: list[str], title: str | None):
        return run_tool(self.build_args(box_args, title))

    def _entry_result(self, proc) -> str | None:
        if proc.returncode == EXIT_TIMEOUT:
            return None
        data = proc.stdout
        if not data and proc.stderr:
            # Older zenity releases print the entry on stderr instead of stdout.
            data = strip_toolkit_noise(proc.stderr)
            logger.debug("zenity stdout empty, using stderr")
        return text_from_output(PROGRAM, proc.returncode, data)

    def show_message(self, dialog) -> None:
        proc = self._execute(["--info", "--text", escape_markup(dialog.text)], dialog.window_title)
        require_success(PROGRAM, proc.returncode, (EXIT_OK, EXIT_CANCEL, EXIT_TIMEOUT))

    def show_input(self, dialog) -> str | None:
        args = ["--entry", "--text", escape_markup(dialog.text)]
        if dialog.default_value is not None:
            args.extend(["--entry-text", dialog.default_value])
        return self._entry_result(self._execute(args, dialog.window_title))

    def show_password(self, dialog) -> str | None:
        args = ["--entry", "--hide-text", "--text", escape_markup(dialog.text)]
        return self._entry_result(self._execute(args, dialog.window_title))

    def show_question(self, dialog) -> Choice:
        proc = self._execute(["--question", "--text", escape_markup(dialog.text)], dialog.window_title)
        # a timeout is handled like closing the window
        if proc.returncode == EXIT_TIMEOUT:
            return Choice.NO
        return choice_from_status(PROGRAM, proc.returncode)

    def __repr__(self) -> str:
        return (
            f"Zenity(icon={self.icon!r}, width={self.width!r}, "
            f"height={self.height!r}, timeout={self.timeout!r})"
        )
