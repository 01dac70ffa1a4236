"""Generic helpers shared across layers."""

from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4


def get_project_root() -> Path:
    """Return the repository root directory.

    Returns:
        Path: Directory containing the ``src`` package.
    """
    return Path(__file__).resolve().parents[2]


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


__all__ = ["get_project_root", "utc_timestamp", "new_id"]
