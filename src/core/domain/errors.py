"""Errors raised by the task runner.

Every error carries a plain, human readable message. The CLI prints it once
and exits with a failure status; nothing in between recovers from them.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every failure surfaced to the user."""

    @property
    def message(self) -> str:
        return str(self)


class ParseError(TaskError):
    """The command line names no mode, or contains an unknown token."""

    def __init__(self, message: str = "undefined mode") -> None:
        super().__init__(message)


class SpawnFailed(TaskError):
    """The tool was found but exited non-zero, or could not be started."""


class InstallFailed(TaskError):
    """The package manager could not run or reported a failure."""


class PostInstallStillMissing(TaskError):
    """Install reported success but the tool still cannot be found."""

    def __init__(self, name: str) -> None:
        super().__init__(f"failed to install {name}")
        self.name = name
