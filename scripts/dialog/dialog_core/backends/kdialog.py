"""KDE ``kdialog`` backend."""

from __future__ import annotations

from dialog_core.backends import Backend, choice_from_status, require_success, run_tool, text_from_output
from dialog_core.models import Choice

PROGRAM = "kdialog"


class KDialog(Backend):
    name = "kdialog"

    def __init__(self, icon: str | None = None) -> None:
        self.icon = icon

    def set_icon(self, icon: str) -> None:
        self.icon = icon

    def build_args(self, box_args: list[str], title: str | None) -> list[str]:
        cmd = [PROGRAM]
        if self.icon is not None:
            cmd.extend(["--icon", self.icon])
        if title is not None:
            cmd.extend(["--title", title])
        cmd.extend(box_args)
        return cmd

    def _execute(self, box_args: list[str], title: str | None):
        return run_tool(self.build_args(box_args, title))

    def show_message(self, dialog) -> None:
        proc = self._execute(["--msgbox", dialog.text], dialog.window_title)
        require_success(PROGRAM, proc.returncode)

    def show_input(self, dialog) -> str | None:
        args = ["--inputbox", dialog.text]
        if dialog.default_value is not None:
            args.append(dialog.default_value)
        proc = self._execute(args, dialog.window_title)
        return text_from_output(PROGRAM, proc.returncode, proc.stdout)

    def show_password(self, dialog) -> str | None:
        proc = self._execute(["--password", dialog.text], dialog.window_title)
        return text_from_output(PROGRAM, proc.returncode, proc.stdout)

    def show_question(self, dialog) -> Choice:
        proc = self._execute(["--yesno", dialog.text], dialog.window_title)
        return choice_from_status(PROGRAM, proc.returncode)

    def __repr__(self) -> str:
        return f"KDialog(icon={self.icon!r})"
