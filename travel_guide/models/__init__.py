"""Data models for the travel guide."""
from .search_params import SearchParams, PlanMode
from .travel import (
    TravelData,
    ItineraryDay,
    ChecklistItem,
    DayLayout,
    FlightEntry,
    GroundingSource,
)
from .session import GuideSession, SessionStore

__all__ = [
    "SearchParams",
    "PlanMode",
    "TravelData",
    "ItineraryDay",
    "ChecklistItem",
    "DayLayout",
    "FlightEntry",
    "GroundingSource",
    "GuideSession",
    "SessionStore",
]
