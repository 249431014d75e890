"""Identifier generation shared by all entities."""

from uuid import uuid4


def new_id() -> str:
    """Generate a fresh, never-reused opaque identifier."""
    return str(uuid4())
