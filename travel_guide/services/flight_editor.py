"""
Flight Editor.
Draft rows edited before they are written back into the accommodations text.
The draft never has zero rows.
"""
from typing import Optional

from .flight_table import decode_flights, embed_flights
from ..models.travel import FlightEntry


def open_editor(accommodations: str) -> list[FlightEntry]:
    """Start a draft from the existing table, or from one blank row."""
    return decode_flights(accommodations) or [FlightEntry()]


def add_row(rows: list[FlightEntry]) -> list[FlightEntry]:
    return rows + [FlightEntry()]


def update_row(
    rows: list[FlightEntry],
    index: int,
    airline: Optional[str] = None,
    price: Optional[str] = None,
    duration: Optional[str] = None,
    transit: Optional[str] = None,
    link: Optional[str] = None
) -> list[FlightEntry]:
    """Change fields of one row; out-of-range indexes leave the draft as is."""
    if not 0 <= index < len(rows):
        return list(rows)
    changes = {
        name: value
        for name, value in (
            ("airline", airline),
            ("price", price),
            ("duration", duration),
            ("transit", transit),
            ("link", link),
        )
        if value is not None
    }
    updated = list(rows)
    updated[index] = rows[index].model_copy(update=changes)
    return updated


def remove_row(rows: list[FlightEntry], index: int) -> list[FlightEntry]:
    """Drop one row; removing the last row leaves a single blank row."""
    if not 0 <= index < len(rows):
        return list(rows)
    remaining = rows[:index] + rows[index + 1:]
    return remaining or [FlightEntry()]


def save_draft(accommodations: str, rows: list[FlightEntry], currency: str) -> str:
    """Write the draft into the accommodations text."""
    return embed_flights(accommodations, rows, currency)
