"""Subprocess adapter: spawn, wait, classify.

Rules:
- The single seam through which external tools are executed.
- Both attempts of the install-on-demand flow go through
  `SubprocessRunner.run`.
- Stdio is inherited; nothing is captured.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from typing import Mapping

from core.domain.models import CommandSpec, RunOutcome


class SubprocessRunner:
    """Runs a `CommandSpec` with inherited stdio and no timeout."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = dict(os.environ if environ is None else environ)

    def build_env(self, spec: CommandSpec) -> dict[str, str]:
        """Parent snapshot merged with the spec's overrides."""

        return {**self._environ, **spec.env}

    def run(self, spec: CommandSpec) -> RunOutcome:
        env = self.build_env(spec)
        name = spec.program

        # Resolve against the child PATH so entries added for the child count.
        executable = shutil.which(name, path=env.get("PATH", ""))
        if executable is None:
            return RunOutcome.not_found()

        try:
            completed = subprocess.run([executable, *spec.args], env=env, check=False)
        except FileNotFoundError:
            return RunOutcome.not_found()
        except OSError as exc:
            return RunOutcome.failed(f"failed to run {name}: {exc}")

        if completed.returncode == 0:
            return RunOutcome.ok()
        return RunOutcome.failed(f"execution of {name} failed")
