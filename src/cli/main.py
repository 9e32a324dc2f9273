"""xtask command line.

`xtask (build|serve) [--no-install]`

Rules:
- typer only provides the entry point and exit handling.
- Help and unknown-option errors are disabled.
- `parse_args` receives the tokens exactly as given, `--` included; click's
  own option parsing never decides what is accepted.
"""

from __future__ import annotations

import typer
from typer.core import TyperCommand

from adapters.cargo_installer import CargoInstaller
from adapters.subprocess_runner import SubprocessRunner
from cli.ui_components import (
    build_console,
    print_command,
    print_error,
    print_install_notice,
    print_parse_error,
)
from core.arguments import parse_args
from core.config import AppSettings
from core.domain.errors import ParseError, TaskError
from core.services.task_runner import TaskRunner

app = typer.Typer(add_completion=False)

_console = build_console()


class RawArgsCommand(TyperCommand):
    """Keeps the untouched argument list in `ctx.meta["raw_args"]`."""

    def parse_args(self, ctx, args):
        ctx.meta["raw_args"] = list(args)
        return super().parse_args(ctx, args)


def build_task_runner(settings: AppSettings) -> TaskRunner:
    """Wire the task runner to the subprocess and cargo adapters."""

    return TaskRunner(
        SubprocessRunner(),
        CargoInstaller(settings),
        bin_dir=settings.bin_dir,
        on_installing=lambda name: print_install_notice(_console, name),
        on_command=(lambda spec: print_command(_console, spec)) if settings.echo_commands else None,
    )


@app.command(
    cls=RawArgsCommand,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(ctx: typer.Context) -> None:
    """Build the wasm bundle or serve the static directory."""

    try:
        invocation = parse_args(ctx.meta["raw_args"])
    except ParseError:
        print_parse_error(_console)
        raise typer.Exit(code=1)

    settings = AppSettings()
    try:
        build_task_runner(settings).start(invocation)
    except TaskError as exc:
        print_error(_console, exc.message)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        raise typer.Exit(code=130)


def run() -> None:
    app()
