"""Analytics, settings and sync endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from trail_kitchen.api.auth import require_api_token
from trail_kitchen.api.models import UnitSystemUpdate  # noqa: TC001
from trail_kitchen.api.responses import ensure_persisted
from trail_kitchen.domain.units import format_weight, is_imperial, round_places

if TYPE_CHECKING:
    from trail_kitchen.containers import AppContainer

router = APIRouter(tags=["insights"], dependencies=[Depends(require_api_token)])


@router.get("/analytics")
async def analytics(request: Request) -> dict[str, object]:
    """Return cross-trip statistics, or an empty marker without completed trips."""
    container: AppContainer = request.app.state.container
    stats = container.stats_service.get_analytics()
    if stats is None:
        return {"has_data": False}
    imperial = is_imperial(container.store.unit_system)
    return {
        "has_data": True,
        **asdict(stats),
        "avg_duration_display": f"{round_places(stats.avg_duration, 1):.1f}",
        "avg_daily_weight_display": format_weight(stats.avg_daily_weight, imperial),
    }


@router.get("/settings/units")
async def get_units(request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    return {"unit_system": container.user_settings_service.get_unit_system()}


@router.put("/settings/units")
async def set_units(payload: UnitSystemUpdate, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    ensure_persisted(
        container.user_settings_service.set_unit_system(payload.unit_system)
    )
    return {"unit_system": container.user_settings_service.get_unit_system()}


@router.post("/settings/units/toggle")
async def toggle_units(request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    ensure_persisted(container.user_settings_service.toggle_unit_system())
    return {"unit_system": container.user_settings_service.get_unit_system()}


@router.post("/sync")
async def sync(request: Request) -> dict[str, object]:
    """Reload trips, food items and settings from persistence."""
    container: AppContainer = request.app.state.container
    errors = container.sync()
    return {"status": "ok" if not errors else "partial", "errors": errors}
