from __future__ import annotations

from typing import Callable

import pytest

from core.domain.errors import InstallFailed
from core.domain.models import CommandSpec, RunOutcome


class FakeRunner:
    """ProcessRunner returning queued outcomes and recording every spec."""

    def __init__(self, *outcomes: RunOutcome) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[CommandSpec] = []

    def run(self, spec: CommandSpec) -> RunOutcome:
        self.calls.append(spec)
        if not self.outcomes:
            raise AssertionError(f"unexpected run of {spec.program}")
        return self.outcomes.pop(0)


class FakeInstaller:
    """ToolInstaller recording requested names; optionally fails."""

    def __init__(self, error: str | None = None, on_install: Callable[[str], None] | None = None) -> None:
        self.error = error
        self.on_install = on_install
        self.installed: list[str] = []

    def install(self, name: str) -> None:
        self.installed.append(name)
        if self.on_install is not None:
            self.on_install(name)
        if self.error is not None:
            raise InstallFailed(self.error)


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def make_installer() -> Callable[..., FakeInstaller]:
    return FakeInstaller
