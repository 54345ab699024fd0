"""
Checklist Editor.
In-memory edits of parsed itinerary days. Every function returns a new list;
days that are not edited are shared with the input list.
"""
from typing import Callable, Optional

from .ids import IdFactory, resolve
from ..models.travel import ChecklistItem, ItineraryDay


def _edit_day(
    days: list[ItineraryDay],
    day_id: str,
    edit: Callable[[list[ChecklistItem]], Optional[list[ChecklistItem]]]
) -> list[ItineraryDay]:
    """Apply `edit` to the checklist of one day; a None result means no change."""
    updated = []
    for day in days:
        if day.id == day_id:
            checklist = edit(day.checklist)
            if checklist is not None:
                day = day.model_copy(update={
                    "checklist": checklist,
                    "layout": ItineraryDay.layout_for(checklist),
                })
        updated.append(day)
    return updated


def update_item(
    days: list[ItineraryDay],
    day_id: str,
    item_id: str,
    text: Optional[str] = None,
    completed: Optional[bool] = None
) -> list[ItineraryDay]:
    """Change the text and/or completed flag of one item."""
    changes = {}
    if text is not None:
        changes["text"] = text
    if completed is not None:
        changes["completed"] = completed

    def edit(checklist):
        if not changes or not any(item.id == item_id for item in checklist):
            return None
        return [
            item.model_copy(update=changes) if item.id == item_id else item
            for item in checklist
        ]

    return _edit_day(days, day_id, edit)


def delete_item(days: list[ItineraryDay], day_id: str, item_id: str) -> list[ItineraryDay]:
    """Remove one item from a day's checklist."""
    def edit(checklist):
        remaining = [item for item in checklist if item.id != item_id]
        return remaining if len(remaining) != len(checklist) else None

    return _edit_day(days, day_id, edit)


def add_item(
    days: list[ItineraryDay],
    day_id: str,
    id_factory: Optional[IdFactory] = None
) -> list[ItineraryDay]:
    """Append an empty, unchecked item to a day's checklist."""
    new_id = resolve(id_factory)
    return _edit_day(
        days,
        day_id,
        lambda checklist: checklist + [ChecklistItem(id=f"item-{new_id()}")]
    )
