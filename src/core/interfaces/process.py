"""Contracts for running and installing external tools."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CommandSpec, RunOutcome


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs a command to completion and classifies how it ended.

    Design rules:
    - Blocks until the child exits; no timeout.
    - Never raises for spawn or exit failures: those are `RunOutcome` values.
    """

    def run(self, spec: CommandSpec) -> RunOutcome:
        ...


@runtime_checkable
class ToolInstaller(Protocol):
    """Installs a tool so that its executable lands in the local bin dir."""

    def install(self, name: str) -> None:
        """Install `name` or raise `InstallFailed`."""

        ...
