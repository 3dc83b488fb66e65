"""Centralized path helpers for the dictionary file and simulation output.

Environment-first, with robust fallbacks that still work when installed
as a package or executed from arbitrary CWDs.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

PACKAGE_DATA = Path(__file__).resolve().parent / "data"


def _find_git_root(start: Path) -> Path | None:
    cur = start
    for _ in range(5):
        if (cur / ".git").exists():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def repo_root() -> Path:
    """Best-effort repository root.

    Order: env var GAMEHUB_REPO_ROOT -> nearest parent containing .git -> CWD.
    Avoids writing under site-packages when installed as a library.
    """
    env = os.getenv("GAMEHUB_REPO_ROOT")
    if env:
        return Path(env)
    here = Path(__file__).resolve()
    git_root = _find_git_root(here)
    if git_root is not None:
        return git_root
    return Path.cwd()


def data_out() -> Path:
    p = os.getenv("GAMEHUB_DATA_OUT")
    return Path(p) if p else repo_root() / "data_out"


def dictionary_path() -> Path:
    """Word list location.

    Order: env var GAMEHUB_DICTIONARY -> ./dic.txt in the CWD -> packaged default.
    The env var is returned even if the file is missing so the loader can report it.
    """
    env = os.getenv("GAMEHUB_DICTIONARY")
    if env:
        return Path(env)
    local = Path.cwd() / "dic.txt"
    if local.exists():
        return local
    return PACKAGE_DATA / "dic.txt"


def get_git_commit() -> str | None:
    """Return the current git commit hash if available.

    Works when running inside a git repo; returns None otherwise.
    """
    root = repo_root()
    try:
        out = subprocess.check_output(
            ["git", "-C", str(root), "rev-parse", "HEAD"],
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=2.0,
        )
        return out.strip() or None
    except (OSError, subprocess.SubprocessError):
        return None
