"""Trip and meal plan endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from trail_kitchen.adapters.documents import trip_to_document
from trail_kitchen.api.auth import require_api_token
from trail_kitchen.api.models import (  # noqa: TC001
    MealSelection,
    TripCreate,
    TripDuplicate,
    TripStatusUpdate,
    TripUpdate,
)
from trail_kitchen.api.responses import ensure_found, ensure_persisted

if TYPE_CHECKING:
    from trail_kitchen.containers import AppContainer
    from trail_kitchen.domain.results import TripResult

router = APIRouter(
    prefix="/trips", tags=["trips"], dependencies=[Depends(require_api_token)]
)


def _trip_response(result: TripResult | None) -> dict[str, object]:
    ensure_persisted(ensure_found(result, "Trip").outcome)
    return trip_to_document(result.trip)


@router.get("")
async def list_trips(request: Request, status: str | None = None) -> dict[str, object]:
    """Return trips, optionally filtered by status."""
    container: AppContainer = request.app.state.container
    trips = container.trip_service.list_trips(status)
    return {"trips": [trip_to_document(trip) for trip in trips]}


@router.post("", status_code=201)
async def create_trip(payload: TripCreate, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.trip_service.create_trip(
        name=payload.name,
        start_date=payload.start_date,
        end_date=payload.end_date,
        notes=payload.notes,
    )
    return _trip_response(result)


@router.get("/{trip_id}")
async def get_trip(trip_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    trip = ensure_found(container.trip_service.get_trip(trip_id), "Trip")
    return trip_to_document(trip)


@router.patch("/{trip_id}")
async def update_trip(
    trip_id: str, payload: TripUpdate, request: Request
) -> dict[str, object]:
    """Edit name, dates or notes."""
    container: AppContainer = request.app.state.container
    result = container.trip_service.update_trip(
        trip_id,
        name=payload.name,
        start_date=payload.start_date,
        end_date=payload.end_date,
        notes=payload.notes,
    )
    return _trip_response(result)


@router.delete("/{trip_id}")
async def delete_trip(trip_id: str, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    outcome = ensure_found(container.trip_service.delete_trip(trip_id), "Trip")
    ensure_persisted(outcome)
    return {"status": "deleted"}


@router.post("/{trip_id}/status")
async def update_status(
    trip_id: str, payload: TripStatusUpdate, request: Request
) -> dict[str, object]:
    """Set the status, or toggle it when none is given."""
    container: AppContainer = request.app.state.container
    if payload.status is None:
        result = container.trip_service.toggle_status(trip_id)
    else:
        result = container.trip_service.set_status(trip_id, payload.status)
    return _trip_response(result)


@router.post("/{trip_id}/duplicate", status_code=201)
async def duplicate_trip(
    trip_id: str, payload: TripDuplicate, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.trip_service.duplicate_trip(
        trip_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        name=payload.name,
    )
    return _trip_response(result)


@router.get("/{trip_id}/stats")
async def trip_stats(trip_id: str, request: Request) -> dict[str, object]:
    """Return totals and daily averages for a trip."""
    container: AppContainer = request.app.state.container
    stats = ensure_found(container.stats_service.get_trip_stats(trip_id), "Trip")
    return asdict(stats)


@router.get("/{trip_id}/export", response_class=HTMLResponse)
async def export_trip(
    trip_id: str, request: Request, unit_system: str | None = None
) -> HTMLResponse:
    """Return a printable HTML document for the trip."""
    container: AppContainer = request.app.state.container
    html = container.export_service.export_trip(trip_id, unit_system)
    return HTMLResponse(ensure_found(html, "Trip"))


@router.post("/{trip_id}/days/{day_id}/meals/{meal_type}", status_code=201)
async def add_meal(
    trip_id: str,
    day_id: str,
    meal_type: str,
    payload: MealSelection,
    request: Request,
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.trip_service.add_meal(
        trip_id, day_id, meal_type, payload.food_item_id, payload.servings
    )
    return _trip_response(result)


@router.put("/{trip_id}/days/{day_id}/meals/{meal_type}/{meal_id}")
async def update_meal(  # noqa: PLR0913
    trip_id: str,
    day_id: str,
    meal_type: str,
    meal_id: str,
    payload: MealSelection,
    request: Request,
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.trip_service.update_meal(
        trip_id, day_id, meal_type, meal_id, payload.food_item_id, payload.servings
    )
    return _trip_response(result)


@router.delete("/{trip_id}/days/{day_id}/meals/{meal_type}/{meal_id}")
async def remove_meal(
    trip_id: str, day_id: str, meal_type: str, meal_id: str, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.trip_service.remove_meal(trip_id, day_id, meal_type, meal_id)
    return _trip_response(result)
