"""
Session management - Holds the active guide and the flight editor draft.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
import uuid

from ..config import settings
from .search_params import SearchParams
from .travel import FlightEntry, TravelData


class GuideSession(BaseModel):
    """One traveler's working state: the unsaved guide and any open editor."""
    session_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique session identifier"
    )
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="Session creation time"
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        description="Last update time"
    )

    params: Optional[SearchParams] = Field(
        None,
        description="Parameters of the last generation request"
    )
    data: Optional[TravelData] = Field(
        None,
        description="Active guide, a detached copy until saved"
    )
    flight_draft: Optional[list[FlightEntry]] = Field(
        None,
        description="Rows of the open flight editor, None when closed"
    )

    @property
    def currency(self) -> str:
        return self.params.currency if self.params else settings.default_currency

    def touch(self):
        self.updated_at = datetime.now()


# In-memory session storage (would be replaced with database in production)
class SessionStore:
    """Simple in-memory session store."""

    def __init__(self):
        self._sessions: dict[str, GuideSession] = {}

    def create(self) -> GuideSession:
        """Create a new session."""
        session = GuideSession()
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Optional[GuideSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def update(self, session: GuideSession):
        """Update a session."""
        session.touch()
        self._sessions[session.session_id] = session

    def delete(self, session_id: str):
        """Delete a session."""
        self._sessions.pop(session_id, None)


# Global session store
session_store = SessionStore()
