"""Pydantic request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field


class TripCreate(BaseModel):
    """Payload for a new trip."""

    name: str = Field(min_length=1)
    start_date: date
    end_date: date
    notes: str | None = None


class TripUpdate(BaseModel):
    """Partial trip edit; omitted fields keep their value."""

    name: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None


class TripStatusUpdate(BaseModel):
    """Explicit status, or a toggle when omitted."""

    status: str | None = None


class TripDuplicate(BaseModel):
    """Target range and optional name for a trip copy."""

    name: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None


class MealSelection(BaseModel):
    """Food item and serving count for a planned meal."""

    food_item_id: str
    servings: int = Field(default=1, gt=0)


class FoodItemCreate(BaseModel):
    """Payload for a new catalog entry."""

    brand: str = ""
    name: str = Field(min_length=1)
    pack_weight: int = Field(gt=0)
    calories: int = Field(gt=0)
    servings_per_pack: int = Field(default=1, gt=0)
    meal_types: list[str] = Field(default_factory=list)
    is_custom: bool = False


class FoodItemUpdate(BaseModel):
    """Partial catalog edit."""

    brand: str | None = None
    name: str | None = Field(default=None, min_length=1)
    pack_weight: int | None = Field(default=None, gt=0)
    calories: int | None = Field(default=None, gt=0)
    servings_per_pack: int | None = Field(default=None, gt=0)
    meal_types: list[str] | None = None


class UnitSystemUpdate(BaseModel):
    unit_system: str
