"""Printable trip document.

The document carries every value pre-formatted and every group pre-ordered,
so the HTML renderer only lays it out.
"""

from dataclasses import dataclass
from datetime import date
from html import escape

from trail_kitchen.domain.meal_types import sort_meal_types
from trail_kitchen.domain.trips import Trip
from trail_kitchen.domain.units import format_weight, is_imperial
from trail_kitchen.services.stats import day_calories, day_weight
from trail_kitchen.services.store import AppStore

BRAND_NAME = "Trail Kitchen"
BRAND_URL = "https://www.trailkitchen.io"


@dataclass(frozen=True)
class MealLine:
    name: str
    weight: str
    calories: str
    description: str


@dataclass(frozen=True)
class MealSection:
    meal_type: str
    meals: list[MealLine]


@dataclass(frozen=True)
class DaySection:
    number: int
    date_label: str
    calories: str
    weight: str
    sections: list[MealSection]


@dataclass(frozen=True)
class TripDocument:
    """Ordered, formatted view of a trip for printing."""

    title: str
    date_range: str
    notes: str | None
    days: list[DaySection]


@dataclass
class ExportService:
    """Builds trip documents using the current unit preference."""

    store: AppStore

    def export_trip(self, trip_id: str, unit_system: str | None = None) -> str | None:
        """Return printable HTML for a trip, or None when it does not exist."""
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        imperial = is_imperial(unit_system or self.store.unit_system)
        return render_trip_html(build_trip_document(trip, imperial))


def build_trip_document(trip: Trip, imperial: bool) -> TripDocument:
    """Order days and meal groups and format every figure."""
    days = []
    for number, day in enumerate(trip.days, start=1):
        sections = [
            MealSection(
                meal_type=meal_type,
                meals=[
                    MealLine(
                        name=meal.name,
                        weight=format_weight(meal.weight, imperial),
                        calories=format_calories(meal.calories),
                        description=meal.description,
                    )
                    for meal in day.meals[meal_type]
                ],
            )
            for meal_type in sort_meal_types(day.meals)
        ]
        days.append(
            DaySection(
                number=number,
                date_label=f"{day.date:%A}, {_short_date(day.date)}",
                calories=format_calories(day_calories(day)),
                weight=format_weight(day_weight(day), imperial),
                sections=sections,
            )
        )
    return TripDocument(
        title=trip.name,
        date_range=(
            f"{_short_date(trip.start_date)} - "
            f"{_short_date(trip.end_date)}, {trip.end_date.year}"
        ),
        notes=trip.notes,
        days=days,
    )


def format_calories(calories: int) -> str:
    """Format calories with thousands separators."""
    return f"{calories:,}"


def _short_date(value: date) -> str:
    return f"{value:%b} {value.day}"


def render_trip_html(document: TripDocument) -> str:
    """Render a trip document as a standalone printable HTML page."""
    parts = [
        _HTML_HEAD.format(title=escape(document.title)),
        '<header><span class="brand">'
        f"{BRAND_NAME}</span>"
        f'<a href="{BRAND_URL}">www.trailkitchen.io</a></header>',
        f"<h1>{escape(document.title)}</h1>",
        f'<p class="dates">{escape(document.date_range)}</p>',
    ]
    if document.notes:
        parts.append(
            '<section class="notes"><h2>Trip Notes</h2>'
            f"<p>{escape(document.notes)}</p></section>"
        )
    for day in document.days:
        parts.append('<section class="day">')
        parts.append(
            f"<h2>Day {day.number}</h2>"
            f'<p class="day-date">{escape(day.date_label)}</p>'
            f'<p class="stats">{day.calories} calories · {escape(day.weight)}</p>'
        )
        for section in day.sections:
            parts.append(
                f'<div class="meal-type {escape(section.meal_type)}">'
                f"<h3>{escape(section.meal_type)}</h3>"
            )
            for meal in section.meals:
                details = f"{meal.weight} · {meal.calories} cal"
                if meal.description:
                    details = f"{details} · {meal.description}"
                parts.append(
                    '<div class="meal">'
                    f'<p class="meal-name">{escape(meal.name)}</p>'
                    f'<p class="meal-details">{escape(details)}</p>'
                    "</div>"
                )
            parts.append("</div>")
        parts.append("</section>")
    parts.append("</body>\n</html>\n")
    return "\n".join(parts)


_HTML_HEAD = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>
      body {{ font-family: Helvetica, sans-serif; margin: 40px; color: #111827; }}
      header {{ display: flex; justify-content: space-between;
        border-bottom: 1px solid #e5e7eb; padding-bottom: 20px; margin-bottom: 40px; }}
      .brand {{ font-size: 24px; color: #059669; font-weight: bold; }}
      header a {{ font-size: 12px; color: #059669; text-decoration: none; }}
      h1 {{ color: #064e3b; }}
      .notes {{ background: #f9fafb; padding: 12px; border-radius: 8px; }}
      .day {{ margin-top: 24px; page-break-inside: avoid; }}
      .meal-type {{ padding: 8px; margin-bottom: 8px; border-radius: 4px; }}
      .meal-type h3 {{ text-transform: capitalize; font-size: 14px; }}
      .breakfast {{ background: #fffbeb; }}
      .lunch {{ background: #ecfdf5; }}
      .dinner {{ background: #eef2ff; }}
      .snack {{ background: #fff1f2; }}
      .drink {{ background: #f0f9ff; }}
      .meal {{ background: white; padding: 8px; margin-bottom: 8px; }}
      .meal-name {{ font-size: 12px; font-weight: bold; margin: 0; }}
      .meal-details {{ font-size: 10px; color: #4b5563; margin: 2px 0 0; }}
    </style>
  </head>
  <body>"""
