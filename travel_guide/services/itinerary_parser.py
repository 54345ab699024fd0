"""
Itinerary Parser.
Turns the ITINERARY section text into day records with checklists.
"""
import logging
import string
from typing import Optional

from .ids import IdFactory, resolve
from ..models.travel import ChecklistItem, DayLayout, ItineraryDay

logger = logging.getLogger(__name__)

BULLET_MARKERS = ("-", "*")


def is_day_heading(line: str) -> bool:
    """
    Check whether a line starts a new day.

    A heading is the word "Day" (any case) followed by optional whitespace
    and a digit, anywhere in the line: "Day 1", "**DAY 2: Kyoto**", "day3".
    """
    lowered = line.lower()
    start = lowered.find("day")
    while start != -1:
        pos = start + 3
        while pos < len(line) and line[pos].isspace():
            pos += 1
        if pos < len(line) and line[pos] in string.digits:
            return True
        start = lowered.find("day", start + 1)
    return False


def bullet_text(line: str) -> Optional[str]:
    """Return the item text of a bullet line, None for other lines."""
    stripped = line.strip()
    if not stripped.startswith(BULLET_MARKERS):
        return None
    return stripped[1:].strip()


class _DayBuilder:
    """The day currently being filled by the scanner."""

    def __init__(self, day_id: str, title: str):
        self.id = day_id
        self.title = title
        self.content_lines: list[str] = []
        self.checklist: list[ChecklistItem] = []

    def build(self) -> ItineraryDay:
        return ItineraryDay(
            id=self.id,
            title=self.title,
            content="".join(self.content_lines),
            checklist=self.checklist,
            layout=ItineraryDay.layout_for(self.checklist)
        )


def parse_itinerary(text: str, id_factory: Optional[IdFactory] = None) -> list[ItineraryDay]:
    """
    Parse itinerary text into days.

    Lines before the first day heading are dropped. Under a day, bullet lines
    become checklist items and every other line is kept in the day content.

    Args:
        text: Raw ITINERARY section
        id_factory: Generator for item identifiers (uuid4 by default)

    Returns:
        Days in source order, empty if no heading was found
    """
    new_id = resolve(id_factory)
    days: list[ItineraryDay] = []
    current: Optional[_DayBuilder] = None

    for index, line in enumerate((text or "").split("\n")):
        if is_day_heading(line):
            if current is not None:
                days.append(current.build())
            current = _DayBuilder(f"day-{index}", line.strip())
            continue

        if current is None:
            continue

        item_text = bullet_text(line)
        if item_text is not None:
            current.checklist.append(ChecklistItem(id=f"item-{new_id()}", text=item_text))
        else:
            current.content_lines.append(line + "\n")

    if current is not None:
        days.append(current.build())

    logger.debug(
        f"Parsed {len(days)} itinerary days "
        f"({sum(1 for d in days if d.layout == DayLayout.CHECKLIST)} with checklists)"
    )
    return days
