"""Identifier generation for new entities."""

from collections.abc import Callable
from uuid import uuid4

IdFactory = Callable[[str], str]


def new_id(prefix: str) -> str:
    """Return a globally unique id such as ``trip-<uuid4>``."""
    return f"{prefix}-{uuid4()}"
