"""Development entry point.

Allows running the CLI from a checkout with `python src/main.py build` in
addition to the installed `xtask` script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
