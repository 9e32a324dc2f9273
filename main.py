"""Development entry point (without installing the package).

Allows running the CLI from the repository root with:
- `python main.py serve`

Why it exists:
- The code lives under `src/` (src layout), so without `pip install -e .`
  Python does not find `cli`, `core`, etc.
- Mirrors the `xtask` console script declared in `pyproject.toml`
  (`xtask = "cli.main:run"`).
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
