"""
Flight Table Codec.
Reads the flight price comparison table out of the accommodations section and
writes edited flights back into it without touching the surrounding text.
"""
from dataclasses import dataclass, field
import logging
import re
from typing import Optional

from ..models.travel import FlightEntry

logger = logging.getLogger(__name__)

FLIGHT_TABLE_HEADING = "### FLIGHT PRICE COMPARISON"
FLIGHT_COLUMNS = ("airline", "price", "duration", "transit", "link")
SEPARATOR_ROW = "|:---|:---|:---|:---|:---|"

_SEPARATOR_CHARS = set("-:| \t")
_BOOKING_LINK = re.compile(r'\[.*\]\((.*)\)')


@dataclass
class TableSpan:
    """Location of a Markdown table inside a larger text."""
    start: int  # Offset of the header row
    end: int  # Offset just past the last body row (line terminator excluded)
    header: str
    body: list[str] = field(default_factory=list)


def _is_row(line: str) -> bool:
    return bool(line.strip()) and "|" in line


def _is_separator(line: str) -> bool:
    stripped = line.strip()
    return (
        "|" in stripped
        and "-" in stripped
        and all(char in _SEPARATOR_CHARS for char in stripped)
    )


def find_table(text: str) -> Optional[TableSpan]:
    """
    Locate the first well-formed pipe table.

    A table is a header row, a separator row made only of '-', ':', '|' and
    whitespace, then at least one body row. Body rows continue until a blank
    line or a line without '|'.
    """
    if not text:
        return None

    lines = text.splitlines(keepends=True)
    offsets = []
    pos = 0
    for line in lines:
        offsets.append(pos)
        pos += len(line)
    rows = [line.rstrip("\r\n") for line in lines]

    for i in range(len(rows) - 2):
        header = rows[i]
        if not _is_row(header) or _is_separator(header):
            continue
        if not _is_separator(rows[i + 1]):
            continue

        body = []
        j = i + 2
        while j < len(rows) and _is_row(rows[j]):
            body.append(rows[j])
            j += 1
        if not body:
            continue

        last = j - 1
        return TableSpan(
            start=offsets[i],
            end=offsets[last] + len(rows[last]),
            header=header,
            body=body
        )
    return None


def split_row(line: str) -> list[str]:
    """Split a table row into trimmed cells, dropping the outer-pipe cells."""
    cells = [cell.strip() for cell in line.strip().split("|")]
    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return cells


def extract_link(cell: str) -> str:
    """URL of a Markdown link cell, or the raw cell when it holds no link."""
    match = _BOOKING_LINK.search(cell)
    return match.group(1) if match else cell


def decode_flights(text: str) -> list[FlightEntry]:
    """
    Read flight rows from the first table in the text.

    Columns are positional: airline, price, duration, transit, booking link.
    Missing trailing columns become empty strings.

    Returns:
        Flight entries in table order, empty if no table is found
    """
    table = find_table(text)
    if table is None:
        return []

    flights = []
    for row in table.body:
        cells = split_row(row)
        cells += [""] * (len(FLIGHT_COLUMNS) - len(cells))
        flights.append(FlightEntry(
            airline=cells[0],
            price=cells[1],
            duration=cells[2],
            transit=cells[3],
            link=extract_link(cells[4])
        ))

    logger.debug(f"Decoded {len(flights)} flight rows")
    return flights


def encode_flights(flights: list[FlightEntry], currency: str) -> str:
    """Write flights as a Markdown table; no flights gives an empty string."""
    if not flights:
        return ""

    header = f"| Airline | Est. Price ({currency}) | Duration | Transit | Booking Link |"
    rows = []
    for flight in flights:
        # An airline cell that already holds a link is kept verbatim
        airline = flight.airline if "[" in flight.airline else f"[{flight.airline}]({flight.link})"
        rows.append(
            f"| {airline} | {flight.price} | {flight.duration} | "
            f"{flight.transit} | [Book Now]({flight.link}) |"
        )
    return "\n".join([header, SEPARATOR_ROW, *rows])


def embed_flights(text: str, flights: list[FlightEntry], currency: str) -> str:
    """
    Put an edited flight list back into the accommodations text.

    The first table is replaced in place. Without a table, a heading and the
    new table are put in front of the existing text.
    """
    table_md = encode_flights(flights, currency)
    table = find_table(text)

    if table is not None:
        return text[:table.start] + table_md + text[table.end:]

    if not table_md:
        return text

    logger.info("No flight table found, prepending a new one")
    return f"{FLIGHT_TABLE_HEADING}\n\n{table_md}\n\n{text}"
