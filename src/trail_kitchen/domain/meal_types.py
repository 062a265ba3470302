"""Meal categories and their display order."""

from collections.abc import Iterable
from typing import Literal

MealType = Literal["breakfast", "lunch", "dinner", "snack", "drink"]

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack", "drink")

MEAL_TYPE_ORDER: dict[str, int] = {
    meal_type: rank for rank, meal_type in enumerate(MEAL_TYPES, start=1)
}

UNKNOWN_RANK = 999


def meal_type_rank(meal_type: str) -> int:
    """Return the display rank of a meal type; unknown labels sort last."""
    return MEAL_TYPE_ORDER.get(meal_type, UNKNOWN_RANK)


def compare_meal_types(a: str, b: str) -> int:
    """Compare two meal types by display rank."""
    return meal_type_rank(a) - meal_type_rank(b)


def sort_meal_types(meal_types: Iterable[str]) -> list[str]:
    """Return meal types in display order."""
    return sorted(meal_types, key=meal_type_rank)


def is_meal_type(value: str) -> bool:
    return value in MEAL_TYPE_ORDER
