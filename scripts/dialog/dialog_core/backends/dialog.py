"""ncurses ``dialog`` backend."""

from __future__ import annotations

from dialog_core.backends import (
    Backend,
    choice_from_status,
    require_success,
    run_tool,
    text_from_output,
)
from dialog_core.models import Choice

PROGRAM = "dialog"


class Dialog(Backend):
    """Terminal dialog boxes drawn by the external ``dialog`` tool.

    A height or width of 0 lets dialog size the box to its content. The
    terminal stays attached to the tool; answers come back on stderr.
    """

    name = "dialog"

    def __init__(self, backtitle: str | None = None, width: int = 0, height: int = 0) -> None:
        self.backtitle = backtitle
        self.width = width
        self.height = height

    def set_backtitle(self, backtitle: str) -> None:
        self.backtitle = backtitle

    def set_width(self, width: int) -> None:
        self.width = width

    def set_height(self, height: int) -> None:
        self.height = height

    def build_args(self, box_args: list[str], title: str | None, extra: list[str] | None = None) -> list[str]:
        cmd = [PROGRAM]
        if self.backtitle is not None:
            cmd.extend(["--backtitle", self.backtitle])
        if title is not None:
            cmd.extend(["--title", title])
        cmd.extend(box_args)
        cmd.extend([str(self.height), str(self.width)])
        if extra:
            cmd.extend(extra)
        return cmd

    def _execute(self, box_args: list[str], title: str | None, extra: list[str] | None = None):
        return run_tool(self.build_args(box_args, title, extra), capture_stdout=False)

    def show_message(self, dialog) -> None:
        proc = self._execute(["--msgbox", dialog.text], dialog.window_title)
        require_success(PROGRAM, proc.returncode)

    def show_input(self, dialog) -> str | None:
        extra = [dialog.default_value] if dialog.default_value is not None else None
        proc = self._execute(["--inputbox", dialog.text], dialog.window_title, extra)
        return text_from_output(PROGRAM, proc.returncode, proc.stderr)

    def show_password(self, dialog) -> str | None:
        proc = self._execute(["--passwordbox", dialog.text], dialog.window_title)
        return text_from_output(PROGRAM, proc.returncode, proc.stderr)

    def show_question(self, dialog) -> Choice:
        proc = self._execute(["--yesno", dialog.text], dialog.window_title)
        return choice_from_status(PROGRAM, proc.returncode)

    def __repr__(self) -> str:
        return f"Dialog(backtitle={self.backtitle!r}, width={self.width}, height={self.height})"
