"""
Search parameters - What the traveler asks the guide to be generated for.
"""
from pydantic import BaseModel, Field, field_validator
from datetime import date
from enum import Enum
import math


class PlanMode(str, Enum):
    """How much effort the AI spends on the guide."""
    FAST = "fast"
    DETAILED = "detailed"
    DEEP = "deep"


class SearchParams(BaseModel):
    """Trip parameters entered by the traveler."""
    origin: str = Field(
        default="",
        description="City the trip starts from"
    )
    destination: str = Field(
        ...,
        min_length=1,
        description="Where the traveler is going"
    )
    check_in: date = Field(
        ...,
        description="First day of the trip"
    )
    check_out: date = Field(
        ...,
        description="Last day of the trip"
    )
    currency: str = Field(
        default="USD",
        description="Currency code used for prices"
    )
    budget: str = Field(
        default="",
        description="Budget amount, in the chosen currency"
    )
    traveler_type: str = Field(
        default="Adventure",
        description="Travel style, e.g. 'Adventure', 'Luxury', 'Family'"
    )
    person: int = Field(
        default=1,
        ge=1,
        description="Number of travelers"
    )
    plan_mode: PlanMode = Field(
        default=PlanMode.DETAILED,
        description="Generation mode"
    )

    @field_validator('currency', mode='before')
    @classmethod
    def normalize_currency(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
        return v or "USD"

    def trip_days(self) -> int:
        """Length of the trip in days, at least one."""
        seconds = abs((self.check_out - self.check_in).total_seconds())
        return math.ceil(seconds / 86400) or 1
