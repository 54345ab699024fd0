"""Tests for checklist editing."""
import pytest

from travel_guide.models.travel import DayLayout
from travel_guide.services import checklist
from travel_guide.services.ids import sequential_id_factory
from travel_guide.services.itinerary_parser import parse_itinerary


@pytest.fixture
def days():
    text = "Day 1: Arrival\nCheck in\n- Buy visa\n- Exchange money\nDay 2: Rest\nSleep in."
    return parse_itinerary(text, id_factory=sequential_id_factory("p"))


class TestUpdateItem:
    """Test changing item fields."""

    def test_update_text(self, days):
        result = checklist.update_item(days, "day-0", "item-p-1", text="Buy e-visa")

        assert result[0].checklist[0].text == "Buy e-visa"
        assert result[0].checklist[0].completed is False
        assert result[0].checklist[1] == days[0].checklist[1]

    def test_update_completed(self, days):
        result = checklist.update_item(days, "day-0", "item-p-2", completed=True)

        assert result[0].checklist[1].completed is True
        assert result[0].checklist[1].text == "Exchange money"

    def test_input_not_mutated(self, days):
        """Edits build a new tree, untouched days are shared."""
        result = checklist.update_item(days, "day-0", "item-p-1", completed=True)

        assert days[0].checklist[0].completed is False
        assert result is not days
        assert result[1] is days[1]

    def test_unknown_ids_are_noops(self, days):
        assert checklist.update_item(days, "day-99", "item-p-1", text="x") == days
        assert checklist.update_item(days, "day-0", "item-missing", text="x") == days

    def test_title_and_content_untouched(self, days):
        result = checklist.update_item(days, "day-0", "item-p-1", text="")

        assert result[0].title == "Day 1: Arrival"
        assert result[0].content == "Check in\n"


class TestDeleteItem:
    """Test removing items."""

    def test_delete(self, days):
        result = checklist.delete_item(days, "day-0", "item-p-1")

        assert [item.id for item in result[0].checklist] == ["item-p-2"]
        assert len(days[0].checklist) == 2

    def test_delete_unknown_is_noop(self, days):
        assert checklist.delete_item(days, "day-0", "item-nope") == days
        assert checklist.delete_item(days, "day-nope", "item-p-1") == days

    def test_empty_checklist_falls_back_to_freeform(self, days):
        result = checklist.delete_item(days, "day-0", "item-p-1")
        result = checklist.delete_item(result, "day-0", "item-p-2")

        assert result[0].checklist == []
        assert result[0].layout == DayLayout.FREEFORM


class TestAddItem:
    """Test adding items."""

    def test_add_appends_blank_item(self, days):
        result = checklist.add_item(days, "day-0", id_factory=sequential_id_factory("new"))

        added = result[0].checklist[-1]
        assert added.id == "item-new-1"
        assert added.text == ""
        assert added.completed is False
        assert len(result[0].checklist) == 3

    def test_add_to_freeform_day(self, days):
        """A freeform day switches to checklist once it has an item."""
        assert days[1].layout == DayLayout.FREEFORM

        result = checklist.add_item(days, "day-4")

        assert result[1].layout == DayLayout.CHECKLIST
        assert result[1].content == "Sleep in.\n"

    def test_add_unknown_day_is_noop(self, days):
        result = checklist.add_item(days, "day-42")

        assert result == days
        assert len(result) == 2

    def test_add_update_delete_restores_day(self, days):
        """Adding then deleting an item leaves the day as it was."""
        for day_id in ("day-0", "day-4"):
            result = checklist.add_item(days, day_id, id_factory=sequential_id_factory("tmp"))
            result = checklist.update_item(result, day_id, "item-tmp-1", completed=True)
            result = checklist.delete_item(result, day_id, "item-tmp-1")

            assert result == days
