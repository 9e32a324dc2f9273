"""Child environment derivation.

Rules:
- Works on a snapshot of the parent environment and returns new values.
- The live `os.environ` is never touched.
"""

from __future__ import annotations

import os
from typing import Mapping

DEFAULT_BIN_DIR = os.path.join(".", "bin")


def _same_entry(entry: str, bin_dir: str) -> bool:
    # "./bin" and "./bin/" name the same directory
    return entry.rstrip("/\\") == bin_dir.rstrip("/\\")


def with_bin_path(path: str | None, bin_dir: str = DEFAULT_BIN_DIR) -> str:
    """Return `path` with `bin_dir` appended unless it is already listed.

    `bin_dir` always goes after every inherited entry.
    Every inherited entry is kept as is, empty ones included. A missing or
    empty PATH yields just `bin_dir`.
    """

    if not path:
        return bin_dir
    entries = path.split(os.pathsep)
    if not any(_same_entry(p, bin_dir) for p in entries):
        entries.append(bin_dir)
    return os.pathsep.join(entries)


def child_environment(
    snapshot: Mapping[str, str],
    bin_dir: str = DEFAULT_BIN_DIR,
) -> dict[str, str]:
    """Environment overrides for a child process: only PATH changes."""

    return {"PATH": with_bin_path(snapshot.get("PATH"), bin_dir)}
