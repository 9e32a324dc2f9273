"""Runner configuration.

Why here:
- Centralizes the environment variables (pydantic-settings) so the CLI and
  the adapters read the installer setup the same way.
- Mode command lines are not configurable; only the install location and
  console behaviour are.
"""

from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central application configuration (`XTASK_*` variables or `.env`)."""

    model_config = SettingsConfigDict(
        env_prefix="XTASK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    installer: str = Field(
        default="cargo",
        min_length=1,
        description="Package manager used to install missing tools.",
    )
    install_root: str = Field(
        default=".",
        min_length=1,
        description="Install root; executables land in its `bin` subdirectory.",
    )
    install_target_dir: str = Field(
        default="target",
        min_length=1,
        description="Scratch build directory handed to the installer.",
    )
    echo_commands: bool = Field(
        default=False,
        description="Print each command line before running it.",
    )

    @property
    def bin_dir(self) -> str:
        """Directory appended to the child PATH (`./bin` by default)."""

        return os.path.join(self.install_root, "bin")
