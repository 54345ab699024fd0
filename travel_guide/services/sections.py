"""
Section Splitter.
Cuts the raw AI response into the six named guide sections.
"""
import logging

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"

# Section field name -> heading keyword, in guide order
SECTION_HEADINGS = {
    "itinerary": "ITINERARY",
    "accommodations": "FLIGHTS & ACCOMMODATIONS",
    "safety": "SAFETY AND CRIME",
    "health": "HEALTH INFORMATION",
    "environmental": "ENVIRONMENTAL AND DISASTERS",
    "tips": "TRAVEL TIPS",
}


def _cut_points(text: str) -> dict[str, list[int]]:
    """Every position at which a heading keyword starts, per keyword."""
    points = {keyword: [] for keyword in SECTION_HEADINGS.values()}
    for pos, char in enumerate(text):
        if not char.isalpha():
            continue
        for keyword, found in points.items():
            # Keywords are ASCII, so slicing then upper-casing keeps offsets exact
            if text[pos:pos + len(keyword)].upper() == keyword:
                found.append(pos)
    return points


def split_sections(text: str) -> dict[str, str]:
    """
    Split a guide into its sections.

    Every occurrence of a heading keyword (case-insensitive, anywhere in the
    text) is a cut point. A section runs from the first occurrence of its
    keyword to the next cut point. Missing sections are NOT_FOUND.

    Returns:
        Dict with all six section names as keys
    """
    text = text or ""
    points = _cut_points(text)
    boundaries = sorted({pos for found in points.values() for pos in found})

    sections = {}
    for name, keyword in SECTION_HEADINGS.items():
        found = points[keyword]
        if not found:
            sections[name] = NOT_FOUND
            continue
        start = found[0]
        end = next((b for b in boundaries if b > start), len(text))
        sections[name] = text[start:end]

    missing = [name for name, value in sections.items() if value == NOT_FOUND]
    if missing:
        logger.debug(f"Sections missing from guide: {missing}")
    return sections


def is_missing(section: str) -> bool:
    """Check whether a section holds the not-found sentinel."""
    return section == NOT_FOUND
