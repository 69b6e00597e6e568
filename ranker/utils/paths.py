#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

# Try to get root from environment variable first
ROOT = os.environ.get('RANKER_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file (like .git or pyproject.toml) in parent directories
    current = Path(__file__).resolve()
    while current.parent != current:
        if any((current / marker).exists() for marker in ['.git', 'pyproject.toml']):
            ROOT = current
            break
        current = current.parent
    else:
        # installed without a checkout: work relative to the current directory
        ROOT = Path.cwd()

DATA         = ROOT / "data"
SESSION_DIR  = DATA / "sessions"
CONFIG_DIR   = ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "ranking.yaml"


def resolve_session_path(name: str | Path) -> Path:
    """Return the session file for *name*.

    An existing path is returned unchanged. A bare name such as ``q3`` is
    looked up as ``data/sessions/q3.json`` then ``q3.yaml``.
    """
    path = Path(name)
    if path.exists() or path.suffix:
        return path
    for suffix in (".json", ".yaml", ".yml"):
        candidate = SESSION_DIR / f"{path.name}{suffix}"
        if candidate.exists():
            return candidate
    return path
