"""Where exports go, and which commit produced them.

Environment variables win; otherwise we look for the enclosing git checkout
and finally fall back to the current working directory.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path


def _git_root(start: Path) -> Path | None:
    for cur in [start] + list(start.parents)[:5]:
        if (cur / ".git").exists():
            return cur
    return None


def repo_root() -> Path:
    env = os.getenv("CHOPSTICKS_REPO_ROOT")
    if env:
        return Path(env)
    root = _git_root(Path(__file__).resolve())
    return root if root is not None else Path.cwd()


def exports_dir() -> Path:
    p = os.getenv("CHOPSTICKS_EXPORTS")
    return Path(p) if p else repo_root() / "exports"


def git_commit() -> str | None:
    """Current commit hash, or None outside a git checkout."""
    try:
        out = subprocess.check_output(
            ["git", "-C", str(repo_root()), "rev-parse", "HEAD"],
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=2.0,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return out.strip() or None
