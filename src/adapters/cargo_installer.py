"""Installs missing tools with `cargo install` into the project directory.

The binary ends up in `<install_root>/bin`, which the task runner appends to
the child PATH.
"""

from __future__ import annotations

import subprocess

from core.config import AppSettings
from core.domain.errors import InstallFailed


class CargoInstaller:
    """`ToolInstaller` backed by `cargo install --locked`."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def command(self, name: str) -> list[str]:
        s = self._settings
        return [
            s.installer,
            "install",
            "--root",
            s.install_root,
            "--target-dir",
            s.install_target_dir,
            "--locked",
            name,
        ]

    def install(self, name: str) -> None:
        try:
            completed = subprocess.run(self.command(name), check=False)
        except OSError as exc:
            raise InstallFailed(f"failed to run {self._settings.installer}: {exc}") from exc

        if completed.returncode != 0:
            raise InstallFailed(f"failed to install {name}")
