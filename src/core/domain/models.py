"""Domain models (Pydantic v2).

These describe *what* a task invocation is: which mode was requested, which
external command it maps to and how an attempt to run it ended. They know
nothing about subprocesses or the terminal.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Mode(str, Enum):
    """Primary action selected on the command line."""

    BUILD = "build"
    SERVE = "serve"

    @classmethod
    def from_token(cls, token: str) -> "Mode | None":
        """Return the mode named by `token`, or None if it names none."""

        try:
            return cls(token)
        except ValueError:
            return None


class Options(BaseModel):
    """Flags that modify how a mode is executed."""

    model_config = ConfigDict(frozen=True)

    no_install: bool = Field(
        default=False,
        description="Skip the automatic install of a missing tool.",
    )


class Invocation(BaseModel):
    """A fully parsed command line."""

    model_config = ConfigDict(frozen=True)

    mode: Mode
    options: Options = Field(default_factory=Options)


class CommandSpec(BaseModel):
    """An external command: program, ordered arguments and env overrides."""

    model_config = ConfigDict(frozen=True)

    program: str = Field(
        ...,
        min_length=1,
        description="Executable name, resolved through PATH.",
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="Arguments passed after the program name, in order.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Variables set in the child environment on top of the inherited ones.",
    )

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def with_env(self, overrides: dict[str, str]) -> "CommandSpec":
        """Return a copy whose environment overrides also include `overrides`."""

        return self.model_copy(update={"env": {**self.env, **overrides}})


class RunStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class RunOutcome(BaseModel):
    """How a single attempt to run a `CommandSpec` ended.

    `message` is only set for `RunStatus.FAILED`.
    """

    model_config = ConfigDict(frozen=True)

    status: RunStatus
    message: str | None = None

    @classmethod
    def ok(cls) -> "RunOutcome":
        return cls(status=RunStatus.OK)

    @classmethod
    def not_found(cls) -> "RunOutcome":
        return cls(status=RunStatus.NOT_FOUND)

    @classmethod
    def failed(cls, message: str) -> "RunOutcome":
        return cls(status=RunStatus.FAILED, message=message)
