"""
Travel guide models - The AI-derived guide and the structures parsed out of it.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum
import time
import uuid


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class GroundingSource(BaseModel):
    """A citation attached to the AI output, passed through unmodified."""
    title: Optional[str] = None
    uri: Optional[str] = None


class ChecklistItem(BaseModel):
    """A single checklist entry of an itinerary day."""
    id: str = Field(..., description="Globally unique item identifier")
    text: str = Field(default="", description="Editable item text, may be empty")
    completed: bool = Field(default=False, description="Whether the item is ticked off")


class DayLayout(str, Enum):
    """How a day is displayed."""
    FREEFORM = "freeform"  # Narrative content only
    CHECKLIST = "checklist"  # Checklist items


class ItineraryDay(BaseModel):
    """One day of the itinerary, as parsed from the ITINERARY section."""
    id: str = Field(..., description="Positional identifier, stable within one parse")
    title: str = Field(..., description="Raw heading line, e.g. 'Day 1: Arrival'")
    content: str = Field(
        default="",
        description="Narrative lines that are not checklist items"
    )
    checklist: list[ChecklistItem] = Field(default_factory=list)
    layout: DayLayout = Field(default=DayLayout.FREEFORM)

    @staticmethod
    def layout_for(checklist: list[ChecklistItem]) -> DayLayout:
        return DayLayout.CHECKLIST if checklist else DayLayout.FREEFORM


class FlightEntry(BaseModel):
    """One row of the flight price comparison table."""
    airline: str = ""
    price: str = ""
    duration: str = ""
    transit: str = ""
    link: str = ""


class TravelData(BaseModel):
    """Complete AI-generated travel guide."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    custom_name: Optional[str] = Field(None, alias="customName")
    itinerary: str = "Not found"
    accommodations: str = "Not found"
    safety: str = "Not found"
    health: str = "Not found"
    environmental: str = "Not found"
    tips: str = "Not found"
    sources: list[GroundingSource] = Field(default_factory=list)
    created_at: int = Field(default_factory=now_ms, alias="createdAt")
    parsed_itinerary: Optional[list[ItineraryDay]] = Field(None, alias="parsedItinerary")

    @property
    def display_name(self) -> str:
        return self.custom_name or "Unnamed Plan"
