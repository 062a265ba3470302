"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from trail_kitchen.adapters.documents import food_item_to_document
from trail_kitchen.api.auth import require_api_token
from trail_kitchen.api.models import FoodItemCreate, FoodItemUpdate  # noqa: TC001
from trail_kitchen.api.responses import (
    ensure_found,
    ensure_persisted,
    serialize_outcome,
)

if TYPE_CHECKING:
    from trail_kitchen.containers import AppContainer

router = APIRouter(
    prefix="/foods", tags=["foods"], dependencies=[Depends(require_api_token)]
)


@router.get("")
async def list_foods(  # noqa: PLR0913
    request: Request,
    query: str | None = None,
    meal_type: str | None = None,
    favorites: bool = False,
    sort: str = "name",
    direction: str = "asc",
) -> dict[str, object]:
    """Search and sort the catalog."""
    container: AppContainer = request.app.state.container
    items = container.food_service.search(
        query,
        meal_type=meal_type,
        favorites_only=favorites,
        sort=sort,
        descending=direction == "desc",
    )
    return {"food_items": [food_item_to_document(item) for item in items]}


@router.post("", status_code=201)
async def create_food(payload: FoodItemCreate, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = container.food_service.create_food_item(**payload.model_dump())
    ensure_persisted(result.outcome)
    return food_item_to_document(result.item)


@router.patch("/{food_item_id}")
async def update_food(
    food_item_id: str, payload: FoodItemUpdate, request: Request
) -> dict[str, object]:
    """Edit a catalog entry; planned meals keep their snapshot."""
    container: AppContainer = request.app.state.container
    result = ensure_found(
        container.food_service.update_food_item(
            food_item_id, payload.model_dump(exclude_none=True)
        ),
        "Food item",
    )
    ensure_persisted(result.outcome)
    return food_item_to_document(result.item)


@router.delete("/{food_item_id}")
async def delete_food(food_item_id: str, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    outcome = ensure_found(
        container.food_service.delete_food_item(food_item_id), "Food item"
    )
    ensure_persisted(outcome)
    return {"status": "deleted"}


@router.post("/{food_item_id}/favorite")
async def toggle_favorite(food_item_id: str, request: Request) -> dict[str, object]:
    """Flip the favorite flag and report each trip write of the fan-out."""
    container: AppContainer = request.app.state.container
    result = ensure_found(
        container.food_service.toggle_favorite(food_item_id), "Food item"
    )
    ensure_persisted(result.outcome)
    return {
        "food_item": food_item_to_document(result.item),
        "trips": [serialize_outcome(outcome) for outcome in result.trip_outcomes],
    }
