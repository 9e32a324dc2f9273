"""Task orchestration: mode dispatch and the install-on-demand run.

The CLI parses the command line and hands an `Invocation` to `TaskRunner`.
Printing stays out of this module; the installing notice and the echoed
command line are delivered through optional callbacks.
"""

from __future__ import annotations

import os
from typing import Callable, Mapping

from core.domain.errors import PostInstallStillMissing, SpawnFailed
from core.domain.models import CommandSpec, Invocation, Mode, Options, RunOutcome, RunStatus
from core.environment import DEFAULT_BIN_DIR, child_environment
from core.interfaces.process import ProcessRunner, ToolInstaller

_COMMANDS: dict[Mode, CommandSpec] = {
    Mode.BUILD: CommandSpec(
        program="wasm-pack",
        args=(
            "build",
            "web",
            "--no-pack",
            "--no-typescript",
            "--target",
            "web",
            "--out-dir",
            "../static/pkg",
        ),
    ),
    Mode.SERVE: CommandSpec(
        program="miniserve",
        args=("--index", "index.html", "static"),
    ),
}


def command_for(mode: Mode) -> CommandSpec:
    """Return the fixed external command for `mode`."""

    return _COMMANDS[mode].model_copy()


class TaskRunner:
    """Runs a mode's command, installing the tool once if it is missing."""

    def __init__(
        self,
        runner: ProcessRunner,
        installer: ToolInstaller,
        *,
        environ: Mapping[str, str] | None = None,
        bin_dir: str = DEFAULT_BIN_DIR,
        on_installing: Callable[[str], None] | None = None,
        on_command: Callable[[CommandSpec], None] | None = None,
    ) -> None:
        self._runner = runner
        self._installer = installer
        self._environ = dict(os.environ if environ is None else environ)
        self._bin_dir = bin_dir
        self._on_installing = on_installing
        self._on_command = on_command

    def start(self, invocation: Invocation) -> None:
        self.install_and_run(command_for(invocation.mode), invocation.options)

    def prepare(self, spec: CommandSpec) -> CommandSpec:
        """Return `spec` with the local bin dir appended to its child PATH."""

        return spec.with_env(child_environment(self._environ, self._bin_dir))

    def install_and_run(self, spec: CommandSpec, options: Options) -> None:
        """Run `spec`; on a missing executable install it and retry once.

        Raises:
        - `SpawnFailed` when a run fails for any reason other than not found.
        - `InstallFailed` (from the installer) when installing fails.
        - `PostInstallStillMissing` when the retry still finds no executable.
        """

        spec = self.prepare(spec)
        name = spec.program

        outcome = self._attempt(spec)
        if outcome.status is RunStatus.OK:
            return
        if outcome.status is RunStatus.FAILED:
            raise SpawnFailed(outcome.message or f"execution of {name} failed")
        if options.no_install:
            return

        if self._on_installing is not None:
            self._on_installing(name)
        self._installer.install(name)

        outcome = self._attempt(spec)
        if outcome.status is RunStatus.OK:
            return
        if outcome.status is RunStatus.NOT_FOUND:
            raise PostInstallStillMissing(name)
        raise SpawnFailed(outcome.message or f"execution of {name} failed")

    def _attempt(self, spec: CommandSpec) -> RunOutcome:
        if self._on_command is not None:
            self._on_command(spec)
        return self._runner.run(spec)
