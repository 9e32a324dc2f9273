"""Console output helpers (Rich).

Why separate components:
- Message formatting stays out of the command function.
- Everything goes to stderr; stdout belongs to the external tools.
"""

from __future__ import annotations

import shlex

from rich.console import Console
from rich.text import Text

from core.domain.models import CommandSpec


def build_console() -> Console:
    return Console(stderr=True, soft_wrap=True, highlight=False)


def print_install_notice(console: Console, name: str) -> None:
    console.print(Text(f"{name} not found, installing.."))


def print_command(console: Console, spec: CommandSpec) -> None:
    """Echo the command line about to run (`echo_commands`)."""

    console.print(Text(f"$ {shlex.join(spec.argv)}", style="dim"))


def print_parse_error(console: Console) -> None:
    console.print(Text("undefined mode"))


def print_error(console: Console, message: str) -> None:
    """Print the final error line: `error: <message>`."""

    line = Text("error: ", style="bold red")
    line.append(message)
    console.print(line)
