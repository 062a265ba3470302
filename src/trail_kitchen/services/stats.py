"""Statistics for single trips and across completed trips.

Every figure is derived from the trip data passed in on each call; nothing is
cached on the trip or in the service.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from trail_kitchen.domain.meal_types import sort_meal_types
from trail_kitchen.domain.stats import (
    ChartPoint,
    CrossTripStats,
    DayTotals,
    TripStats,
    TripSummaryRow,
)
from trail_kitchen.domain.trips import DayPlan, Trip, duration_days
from trail_kitchen.domain.units import round_half_up
from trail_kitchen.services.store import AppStore

RECENT_TRIPS_LIMIT = 5


@dataclass
class StatsService:
    """Service for computing trip statistics from the current snapshot."""

    store: AppStore

    def get_trip_stats(self, trip_id: str) -> TripStats | None:
        """Return totals for one trip, or None when it no longer exists."""
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        return aggregate_trip(trip)

    def get_analytics(self) -> CrossTripStats | None:
        """Return cross-trip statistics, or None when no trip is completed."""
        return aggregate_completed_trips(self.store.list_trips())


def day_calories(day: DayPlan) -> int:
    return sum(meal.calories for meals in day.meals.values() for meal in meals)


def day_weight(day: DayPlan) -> int:
    return sum(meal.weight for meals in day.meals.values() for meal in meals)


def trip_duration(trip: Trip) -> int:
    """Return the inclusive day count of the trip's date range."""
    return duration_days(trip.start_date, trip.end_date)


def aggregate_trip(trip: Trip) -> TripStats:
    """Compute per-day totals, trip totals and daily averages."""
    daily = [
        DayTotals(
            day_id=day.id,
            day=day.date,
            calories=day_calories(day),
            weight=day_weight(day),
        )
        for day in trip.days
    ]
    total_calories = sum(entry.calories for entry in daily)
    total_weight = sum(entry.weight for entry in daily)
    return TripStats(
        trip_id=trip.id,
        duration_days=trip_duration(trip),
        daily=daily,
        total_calories=total_calories,
        total_weight=total_weight,
        avg_daily_calories=_safe_average(total_calories, len(daily)),
        avg_daily_weight=_safe_average(total_weight, len(daily)),
    )


def aggregate_completed_trips(trips: Iterable[Trip]) -> CrossTripStats | None:
    """Compute statistics across completed trips.

    Daily averages divide by the total number of days across all trips, so
    longer trips weigh more than shorter ones.
    """
    completed = [trip for trip in trips if trip.is_completed]
    if not completed:
        return None

    total_days = sum(trip_duration(trip) for trip in completed)
    total_calories = 0
    total_weight = 0
    distribution: dict[str, int] = {}
    for trip in completed:
        for day in trip.days:
            for meal_type, meals in day.meals.items():
                calories = sum(meal.calories for meal in meals)
                total_calories += calories
                total_weight += sum(meal.weight for meal in meals)
                distribution[meal_type] = distribution.get(meal_type, 0) + calories

    ordered_distribution = {
        meal_type: distribution[meal_type]
        for meal_type in sort_meal_types(distribution)
    }
    rows = summarize_trips(completed)
    return CrossTripStats(
        trip_count=len(completed),
        total_days=total_days,
        avg_duration=total_days / len(completed),
        total_calories=total_calories,
        total_weight=total_weight,
        avg_daily_calories=_safe_average(total_calories, total_days),
        avg_daily_weight=_safe_average(total_weight, total_days),
        meal_type_distribution=ordered_distribution,
        trips=rows,
        recent_trips=recent_trip_calories(completed),
        distribution=[
            ChartPoint(label=meal_type, value=calories)
            for meal_type, calories in ordered_distribution.items()
        ],
    )


def summarize_trips(trips: Iterable[Trip]) -> list[TripSummaryRow]:
    """Return one summary row per trip, most recently ended first."""
    rows = []
    for trip in trips:
        duration = trip_duration(trip)
        total_calories = sum(day_calories(day) for day in trip.days)
        total_weight = sum(day_weight(day) for day in trip.days)
        rows.append(
            TripSummaryRow(
                trip_id=trip.id,
                name=trip.name,
                start_date=trip.start_date,
                end_date=trip.end_date,
                duration_days=duration,
                total_calories=total_calories,
                avg_daily_calories=_safe_average(total_calories, duration),
                total_weight=total_weight,
                avg_daily_weight=_safe_average(total_weight, duration),
            )
        )
    return sorted(rows, key=lambda row: row.end_date, reverse=True)


def recent_trip_calories(
    trips: Iterable[Trip], limit: int = RECENT_TRIPS_LIMIT
) -> list[ChartPoint]:
    """Return average daily calories for the most recently ended trips."""
    recent = sorted(trips, key=lambda trip: trip.end_date, reverse=True)[:limit]
    return [
        ChartPoint(
            label=trip.name,
            value=_safe_average(
                sum(day_calories(day) for day in trip.days), len(trip.days)
            ),
        )
        for trip in recent
    ]


def _safe_average(total: int, count: int) -> int:
    if count <= 0:
        return 0
    return round_half_up(total / count)
