"""Generic project helpers."""

from pathlib import Path
from uuid import uuid4


def get_project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).resolve().parents[2]


def generate_id() -> str:
    """Return a new opaque 32-character hex identifier."""
    return uuid4().hex


__all__ = ["get_project_root", "generate_id"]
