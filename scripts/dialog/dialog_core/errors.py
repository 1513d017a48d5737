"""Error taxonomy shared by every backend."""

from __future__ import annotations


class DialogError(Exception):
    """Base class for everything a render call can raise."""


class BackendNotAvailable(DialogError):
    def __init__(self, program: str) -> None:
        super().__init__(f"{program} not found on PATH")
        self.program = program


class BackendFailed(DialogError):
    def __init__(self, program: str, exit_code: int) -> None:
        if exit_code < 0:
            message = f"{program} was terminated by signal {-exit_code}"
        else:
            message = f"{program} failed with exit status {exit_code}"
        super().__init__(message)
        self.program = program
        self.exit_code = exit_code


class OutputDecodeError(DialogError):
    def __init__(self, program: str, reason: str = "") -> None:
        message = f"could not decode output of {program}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.program = program


class DialogIOError(DialogError):
    """Console read/write failure, or a tool that could not be launched."""
