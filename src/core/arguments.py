"""Command line parsing.

The accepted shape is `(build|serve) [--no-install]` with the flag allowed on
either side of the mode. Parsing is all-or-nothing: any token that is not the
single mode or the known flag fails the whole command line.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.errors import ParseError
from core.domain.models import Invocation, Mode, Options

NO_INSTALL_FLAG = "--no-install"


def parse_args(argv: Sequence[str]) -> Invocation:
    """Parse `argv` (program name excluded) into an `Invocation`.

    Raises `ParseError("undefined mode")` when no mode is given, a second mode
    is given, or a token is neither a mode nor `--no-install`.
    """

    mode: Mode | None = None
    no_install = False

    for token in argv:
        if token == NO_INSTALL_FLAG:
            no_install = True
            continue
        found = Mode.from_token(token)
        if found is None or mode is not None:
            raise ParseError()
        mode = found

    if mode is None:
        raise ParseError()

    return Invocation(mode=mode, options=Options(no_install=no_install))
