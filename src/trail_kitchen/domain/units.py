"""Weight conversion and rounding helpers shared by every view."""

from decimal import ROUND_HALF_UP, Decimal

OUNCES_PER_GRAM = 0.035274
OUNCES_PER_POUND = 16
GRAMS_PER_KILOGRAM = 1000

METRIC = "metric"
IMPERIAL = "imperial"
UNIT_SYSTEMS = (METRIC, IMPERIAL)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_places(value: float, places: int) -> float:
    """Round to ``places`` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def convert_weight(grams: float, imperial: bool) -> tuple[float, str]:
    """Convert grams into a display value and unit.

    Metric weights stay in grams below one kilogram. Imperial weights switch
    from ounces to pounds at 16oz.
    """
    if imperial:
        ounces = grams * OUNCES_PER_GRAM
        if ounces >= OUNCES_PER_POUND:
            return round_places(ounces / OUNCES_PER_POUND, 2), "lb"
        return round_places(ounces, 1), "oz"
    if grams >= GRAMS_PER_KILOGRAM:
        return round_places(grams / GRAMS_PER_KILOGRAM, 2), "kg"
    return grams, "g"


def format_weight(grams: float, imperial: bool) -> str:
    """Return a compact weight string such as ``2.3kg`` or ``4oz``."""
    value, unit = convert_weight(grams, imperial)
    return f"{format_number(value)}{unit}"


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for integral values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def is_imperial(unit_system: str) -> bool:
    return unit_system == IMPERIAL
