"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DayTotals:
    """Calories and weight planned for one day."""

    day_id: str
    day: date
    calories: int
    weight: int


@dataclass(frozen=True)
class TripStats:
    """Totals and daily averages for a single trip."""

    trip_id: str
    duration_days: int
    daily: list[DayTotals]
    total_calories: int
    total_weight: int
    avg_daily_calories: int
    avg_daily_weight: int


@dataclass(frozen=True)
class TripSummaryRow:
    """One row of the completed-trip summary table."""

    trip_id: str
    name: str
    start_date: date
    end_date: date
    duration_days: int
    total_calories: int
    avg_daily_calories: int
    total_weight: int
    avg_daily_weight: int


@dataclass(frozen=True)
class ChartPoint:
    """Labelled value for a chart series."""

    label: str
    value: int


@dataclass(frozen=True)
class CrossTripStats:
    """Statistics across every completed trip."""

    trip_count: int
    total_days: int
    avg_duration: float
    total_calories: int
    total_weight: int
    avg_daily_calories: int
    avg_daily_weight: int
    meal_type_distribution: dict[str, int]
    trips: list[TripSummaryRow]
    recent_trips: list[ChartPoint]
    distribution: list[ChartPoint]
