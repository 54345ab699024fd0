"""
Guide Controller - Owns the session's mutable guide reference.
Each operation applies a pure transformation (parser, checklist editor, flight
editor) and stores the result back on the session.
"""
import logging
from typing import Optional

from . import checklist, flight_editor
from .guide_generator import GuideGenerator, get_generator
from .ids import IdFactory
from .itinerary_parser import parse_itinerary
from .markdown_view import render_html, render_markdown
from .plan_store import SavedPlanStore, default_plan_name, get_plan_store
from .sections import SECTION_HEADINGS, is_missing
from ..errors import FlightEditorClosedError, NoActiveGuideError
from ..models.search_params import SearchParams
from ..models.session import GuideSession, SessionStore, session_store
from ..models.travel import FlightEntry, TravelData

logger = logging.getLogger(__name__)


class GuideController:
    """
    Applies user actions to a session.

    The controller makes all state changes:
    - Generating and parsing a new guide
    - Checklist edits on the parsed itinerary
    - The flight editor draft and writing it back
    - Saving and loading plans
    """

    def __init__(
        self,
        generator: Optional[GuideGenerator] = None,
        plans: Optional[SavedPlanStore] = None,
        sessions: Optional[SessionStore] = None,
        id_factory: Optional[IdFactory] = None
    ):
        self._generator = generator
        self._plans = plans
        self.sessions = sessions or session_store
        self.id_factory = id_factory

    @property
    def generator(self) -> GuideGenerator:
        if self._generator is None:
            self._generator = get_generator()
        return self._generator

    @property
    def plans(self) -> SavedPlanStore:
        if self._plans is None:
            self._plans = get_plan_store()
        return self._plans

    def _require_data(self, session: GuideSession) -> TravelData:
        if session.data is None:
            raise NoActiveGuideError("No travel guide in this session yet")
        return session.data

    def _with_parsed(self, data: TravelData) -> TravelData:
        if data.parsed_itinerary is not None:
            return data
        return data.model_copy(
            update={"parsed_itinerary": parse_itinerary(data.itinerary, self.id_factory)}
        )

    def _commit(self, session: GuideSession, data: TravelData) -> TravelData:
        session.data = data
        self.sessions.update(session)
        return data

    # Guide lifecycle

    async def generate(
        self,
        session: GuideSession,
        params: SearchParams,
        media_description: Optional[str] = None
    ) -> TravelData:
        """Generate a new guide, replacing the session's current one."""
        data = await self.generator.generate(params, media_description)
        session.params = params
        session.flight_draft = None
        return self._commit(session, self._with_parsed(data))

    def load_plan(self, session: GuideSession, plan_id: str) -> Optional[TravelData]:
        """Make a saved plan the session's active guide (as a detached copy)."""
        plan = self.plans.get(plan_id)
        if plan is None:
            return None
        session.flight_draft = None
        return self._commit(session, self._with_parsed(plan))

    def save_plan(self, session: GuideSession, name: Optional[str] = None) -> TravelData:
        data = self._require_data(session)
        if not name and session.params is not None:
            name = default_plan_name(session.params)
        return self.plans.save(data, name)

    # Checklist

    def _edit_days(self, session: GuideSession, edit) -> TravelData:
        data = self._require_data(session)
        if data.parsed_itinerary is None:
            return data
        return self._commit(
            session,
            data.model_copy(update={"parsed_itinerary": edit(data.parsed_itinerary)})
        )

    def update_item(
        self,
        session: GuideSession,
        day_id: str,
        item_id: str,
        text: Optional[str] = None,
        completed: Optional[bool] = None
    ) -> TravelData:
        return self._edit_days(
            session,
            lambda days: checklist.update_item(days, day_id, item_id, text=text, completed=completed)
        )

    def delete_item(self, session: GuideSession, day_id: str, item_id: str) -> TravelData:
        return self._edit_days(session, lambda days: checklist.delete_item(days, day_id, item_id))

    def add_item(self, session: GuideSession, day_id: str) -> TravelData:
        return self._edit_days(session, lambda days: checklist.add_item(days, day_id, self.id_factory))

    # Flight editor

    def _require_draft(self, session: GuideSession) -> list[FlightEntry]:
        if session.flight_draft is None:
            raise FlightEditorClosedError("The flight editor is not open")
        return session.flight_draft

    def _set_draft(self, session: GuideSession, rows: Optional[list[FlightEntry]]):
        session.flight_draft = rows
        self.sessions.update(session)
        return rows

    def open_flight_editor(self, session: GuideSession) -> list[FlightEntry]:
        data = self._require_data(session)
        return self._set_draft(session, flight_editor.open_editor(data.accommodations))

    def add_flight_row(self, session: GuideSession) -> list[FlightEntry]:
        return self._set_draft(session, flight_editor.add_row(self._require_draft(session)))

    def update_flight_row(self, session: GuideSession, index: int, **fields) -> list[FlightEntry]:
        rows = self._require_draft(session)
        return self._set_draft(session, flight_editor.update_row(rows, index, **fields))

    def remove_flight_row(self, session: GuideSession, index: int) -> list[FlightEntry]:
        return self._set_draft(session, flight_editor.remove_row(self._require_draft(session), index))

    def cancel_flight_editor(self, session: GuideSession):
        self._set_draft(session, None)

    def save_flights(self, session: GuideSession) -> TravelData:
        """Write the draft into the accommodations text and close the editor."""
        data = self._require_data(session)
        rows = self._require_draft(session)
        accommodations = flight_editor.save_draft(data.accommodations, rows, session.currency)
        session.flight_draft = None
        logger.info(f"Saved {len(rows)} flight rows for session {session.session_id}")
        return self._commit(session, data.model_copy(update={"accommodations": accommodations}))

    # Display

    def sections_view(self, session: GuideSession) -> dict:
        """Display trees for every section, plus the itinerary fallback flag."""
        data = self._require_data(session)
        view = {}
        for name in SECTION_HEADINGS:
            raw = getattr(data, name)
            nodes = render_markdown(raw)
            view[name] = {
                "raw": raw,
                "missing": is_missing(raw),
                "nodes": [node.model_dump() for node in nodes],
                "html": render_html(nodes),
            }
        # Without parsed days the raw itinerary text is shown instead
        view["itinerary_fallback"] = not data.parsed_itinerary
        return view


# Global controller instance
controller: Optional[GuideController] = None


def get_guide_controller() -> GuideController:
    """Get or create the global guide controller."""
    global controller
    if controller is None:
        controller = GuideController()
    return controller
