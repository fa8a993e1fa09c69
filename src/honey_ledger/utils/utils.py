"""Filesystem helpers shared across layers."""

import os
from pathlib import Path


def get_project_root() -> Path:
    """Return the directory holding data/ and logs/.

    ``HONEY_LEDGER_HOME`` overrides the repository root.

    Returns:
        Path: Absolute project root path.
    """
    override = os.getenv("HONEY_LEDGER_HOME")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[3]


__all__ = ["get_project_root"]
