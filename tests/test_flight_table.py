"""Tests for the flight table codec and the flight editor."""
from travel_guide.models.travel import FlightEntry
from travel_guide.services import flight_editor
from travel_guide.services.flight_table import (
    FLIGHT_TABLE_HEADING,
    decode_flights,
    embed_flights,
    encode_flights,
    extract_link,
    find_table,
    split_row,
)


ACCOMMODATIONS = (
    "### FLIGHTS\n\n"
    "| Airline | Est. Price (USD) | Duration | Transit | Booking Link |\n"
    "|:---|:---|:---|:---|:---|\n"
    "| AirX | 500 | 10h | Direct | [Book Now](https://airx.com) |\n\n"
    "Hotel info here"
)

LINKED_FLIGHTS = [
    FlightEntry(
        airline="[SkyLine](https://sky.example)",
        price="540",
        duration="11h 20m",
        transit="Direct",
        link="https://sky.example/book"
    ),
    FlightEntry(
        airline="[Globe Air](https://globe.example)",
        price="460",
        duration="14h",
        transit="1 stop in Dubai, 2h 30m",
        link="https://globe.example/book"
    ),
]


class TestFindTable:
    """Test table detection."""

    def test_finds_span(self):
        table = find_table(ACCOMMODATIONS)

        assert table is not None
        assert ACCOMMODATIONS[table.start:].startswith("| Airline |")
        assert ACCOMMODATIONS[table.end:] == "\n\nHotel info here"
        assert len(table.body) == 1

    def test_no_table(self):
        assert find_table("Just a hotel list.\n- Hotel A") is None
        assert find_table("") is None

    def test_separator_must_be_dashes_and_colons(self):
        """A second row with letters is not a separator."""
        text = "| a | b |\n| x | y |\n| 1 | 2 |"

        assert find_table(text) is None

    def test_header_without_body_is_skipped(self):
        text = "| a | b |\n|---|---|\n\nText\n| c | d |\n|---|---|\n| 1 | 2 |"
        table = find_table(text)

        assert table.header == "| c | d |"
        assert table.body == ["| 1 | 2 |"]

    def test_outer_pipes_optional(self):
        table = find_table("a | b\n--- | ---\n1 | 2")

        assert table is not None
        assert split_row(table.body[0]) == ["1", "2"]


class TestSplitRow:
    """Test cell splitting."""

    def test_outer_cells_dropped(self):
        assert split_row("| a | b | c |") == ["a", "b", "c"]

    def test_inner_empty_cells_kept(self):
        assert split_row("| a |  | c |") == ["a", "", "c"]


class TestDecode:
    """Test reading flights from a table."""

    def test_decode_example(self):
        flights = decode_flights(ACCOMMODATIONS)

        assert flights == [FlightEntry(
            airline="AirX",
            price="500",
            duration="10h",
            transit="Direct",
            link="https://airx.com"
        )]

    def test_no_table_gives_empty_list(self):
        assert decode_flights("Not found") == []

    def test_short_rows_are_padded(self):
        text = "| Airline | Price |\n|---|---|\n| AirY | 300 |"

        assert decode_flights(text) == [FlightEntry(airline="AirY", price="300")]

    def test_link_cell_without_link(self):
        text = "| A | P | D | T | L |\n|---|---|---|---|---|\n| AirZ | 1 | 2h | Direct | airz.com |"

        assert decode_flights(text)[0].link == "airz.com"

    def test_extract_link(self):
        assert extract_link("[Book on X](https://x.example)") == "https://x.example"
        assert extract_link("call the agent") == "call the agent"
        assert extract_link("[Book Now]()") == ""


class TestEncode:
    """Test writing flights as a table."""

    def test_header_and_separator(self):
        table = encode_flights(LINKED_FLIGHTS, "EUR")
        lines = table.split("\n")

        assert lines[0] == "| Airline | Est. Price (EUR) | Duration | Transit | Booking Link |"
        assert lines[1] == "|:---|:---|:---|:---|:---|"
        assert len(lines) == 4

    def test_plain_airline_is_wrapped(self):
        table = encode_flights([FlightEntry(
            airline="AirX", price="500", duration="10h", transit="Direct", link="https://airx.com"
        )], "USD")

        assert table.split("\n")[2] == (
            "| [AirX](https://airx.com) | 500 | 10h | Direct | [Book Now](https://airx.com) |"
        )

    def test_linked_airline_kept_verbatim(self):
        row = encode_flights(LINKED_FLIGHTS[:1], "USD").split("\n")[2]

        assert row.startswith("| [SkyLine](https://sky.example) |")
        assert row.endswith("| [Book Now](https://sky.example/book) |")

    def test_empty_list(self):
        assert encode_flights([], "USD") == ""


class TestRoundTrip:
    """Test decode and encode together."""

    def test_decode_encode(self):
        assert decode_flights(encode_flights(LINKED_FLIGHTS, "USD")) == LINKED_FLIGHTS

    def test_plain_airline_keeps_its_label(self):
        flight = FlightEntry(
            airline="AirX", price="500", duration="10h", transit="Direct", link="https://airx.com"
        )
        decoded = decode_flights(encode_flights([flight], "USD"))[0]

        assert decoded.airline == "[AirX](https://airx.com)"
        assert (decoded.price, decoded.duration, decoded.transit, decoded.link) == (
            "500", "10h", "Direct", "https://airx.com"
        )

    def test_reembed_is_idempotent(self):
        once = embed_flights(ACCOMMODATIONS, LINKED_FLIGHTS, "USD")
        twice = embed_flights(once, LINKED_FLIGHTS, "USD")

        assert decode_flights(once) == LINKED_FLIGHTS
        assert twice == once


class TestEmbed:
    """Test writing edited flights back into the text."""

    def test_edit_price_preserves_surroundings(self):
        flights = decode_flights(ACCOMMODATIONS)
        flights[0] = flights[0].model_copy(update={"price": "550"})

        result = embed_flights(ACCOMMODATIONS, flights, "USD")

        assert result.startswith("### FLIGHTS\n\n| Airline | Est. Price (USD) |")
        assert result.endswith("| 550 | 10h | Direct | [Book Now](https://airx.com) |\n\nHotel info here")
        assert decode_flights(result)[0].price == "550"

    def test_no_table_prepends_heading(self):
        text = "Stay at Hotel Central."
        result = embed_flights(text, LINKED_FLIGHTS, "USD")

        assert result.startswith(f"{FLIGHT_TABLE_HEADING}\n\n| Airline |")
        assert result.endswith("\n\nStay at Hotel Central.")
        assert decode_flights(result) == LINKED_FLIGHTS

    def test_only_first_table_replaced(self):
        text = (
            "| A | B |\n|---|---|\n| 1 | 2 |\n\n"
            "Hotels:\n| Hotel | Price |\n|---|---|\n| Central | 80 |"
        )
        result = embed_flights(text, LINKED_FLIGHTS[:1], "USD")

        assert "| 1 | 2 |" not in result
        assert result.endswith("Hotels:\n| Hotel | Price |\n|---|---|\n| Central | 80 |")

    def test_empty_flights_without_table_leave_text(self):
        assert embed_flights("Hotel info", [], "USD") == "Hotel info"


class TestFlightEditor:
    """Test the flight editor draft."""

    def test_open_without_table_gives_one_blank_row(self):
        rows = flight_editor.open_editor("Not found")

        assert rows == [FlightEntry()]

    def test_open_with_table(self):
        assert len(flight_editor.open_editor(ACCOMMODATIONS)) == 1

    def test_add_and_update_rows(self):
        rows = flight_editor.add_row(flight_editor.open_editor(ACCOMMODATIONS))
        rows = flight_editor.update_row(rows, 1, airline="AirY", price="420")

        assert len(rows) == 2
        assert rows[1].airline == "AirY"
        assert rows[1].price == "420"
        assert rows[1].link == ""

    def test_update_out_of_range_is_noop(self):
        rows = flight_editor.open_editor(ACCOMMODATIONS)

        assert flight_editor.update_row(rows, 5, price="1") == rows

    def test_remove_last_row_leaves_blank_row(self):
        rows = flight_editor.remove_row(flight_editor.open_editor(ACCOMMODATIONS), 0)

        assert rows == [FlightEntry()]

    def test_save_draft(self):
        rows = flight_editor.update_row(flight_editor.open_editor(ACCOMMODATIONS), 0, duration="9h")
        result = flight_editor.save_draft(ACCOMMODATIONS, rows, "USD")

        assert "| 9h |" in result
        assert result.endswith("Hotel info here")

    def test_empty_link_survives_repeated_saves(self):
        rows = flight_editor.update_row(flight_editor.open_editor("Hotel info"), 0, airline="AirX", price="500")
        first = flight_editor.save_draft("Hotel info", rows, "USD")

        reopened = flight_editor.open_editor(first)
        second = flight_editor.save_draft(first, reopened, "USD")

        assert reopened[0].link == ""
        assert second == first
        assert flight_editor.open_editor(second)[0].link == ""
