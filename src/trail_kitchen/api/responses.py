"""Helpers that turn service results into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException, status

from trail_kitchen.domain.results import PersistOutcome

T = TypeVar("T")


def ensure_found(value: T | None, what: str) -> T:
    """Raise 404 when a service reported a missing entity."""
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found"
        )
    return value


def ensure_persisted(outcome: PersistOutcome) -> None:
    """Raise 502 when the local change could not be written."""
    if not outcome.ok:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to persist {outcome.entity_id}: {outcome.error}",
        )


def serialize_outcome(outcome: PersistOutcome) -> dict[str, object]:
    return {"id": outcome.entity_id, "ok": outcome.ok, "error": outcome.error}
