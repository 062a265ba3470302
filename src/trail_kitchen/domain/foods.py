"""Domain models for the food catalog."""

from dataclasses import dataclass

from trail_kitchen.domain.errors import ValidationError
from trail_kitchen.domain.meal_types import MealType, is_meal_type
from trail_kitchen.domain.units import round_half_up


@dataclass(frozen=True)
class FoodItem:
    """A catalog entry for a packable food product."""

    id: str
    brand: str
    name: str
    pack_weight: int
    calories: int
    servings_per_pack: int
    calories_per_serving: int
    meal_types: tuple[MealType, ...]
    is_favorite: bool = False
    is_custom: bool = False


def create_food_item(  # noqa: PLR0913
    *,
    id: str,  # noqa: A002
    brand: str,
    name: str,
    pack_weight: int,
    calories: int,
    servings_per_pack: int,
    meal_types: list[str] | tuple[str, ...],
    is_favorite: bool = False,
    is_custom: bool = False,
) -> FoodItem:
    """Validate input and build a food item with derived calories per serving."""
    if not name.strip():
        raise ValidationError("Food item name must not be empty")
    _require_positive("pack_weight", pack_weight)
    _require_positive("calories", calories)
    _require_positive("servings_per_pack", servings_per_pack)
    unknown = [value for value in meal_types if not is_meal_type(value)]
    if unknown:
        raise ValidationError(f"Unknown meal types: {', '.join(unknown)}")
    return FoodItem(
        id=id,
        brand=brand.strip(),
        name=name.strip(),
        pack_weight=pack_weight,
        calories=calories,
        servings_per_pack=servings_per_pack,
        calories_per_serving=round_half_up(calories / servings_per_pack),
        meal_types=tuple(dict.fromkeys(meal_types)),  # type: ignore[arg-type]
        is_favorite=is_favorite,
        is_custom=is_custom,
    )


def _require_positive(field_name: str, value: int) -> None:
    if value <= 0:
        raise ValidationError(f"{field_name} must be positive")
