"""
API Routes for the Travel Guide.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional
import logging

from ..errors import (
    FlightEditorClosedError,
    GuideGenerationError,
    NoActiveGuideError,
    PlanStoreError,
)
from ..models.search_params import SearchParams
from ..models.session import GuideSession
from ..models.travel import FlightEntry
from ..services.guide_controller import get_guide_controller


router = APIRouter(prefix="/api", tags=["travel-guide"])

logger = logging.getLogger(__name__)


# Request/Response Models
class CreateSessionResponse(BaseModel):
    session_id: str


class GenerateRequest(BaseModel):
    params: SearchParams
    media_description: Optional[str] = None


class ItemUpdateRequest(BaseModel):
    text: Optional[str] = None
    completed: Optional[bool] = None


class FlightRowUpdateRequest(BaseModel):
    airline: Optional[str] = None
    price: Optional[str] = None
    duration: Optional[str] = None
    transit: Optional[str] = None
    link: Optional[str] = None


class FlightDraftResponse(BaseModel):
    rows: list[FlightEntry]


class SavePlanRequest(BaseModel):
    session_id: str
    name: Optional[str] = None


class RenamePlanRequest(BaseModel):
    name: str


def _get_session(session_id: str) -> GuideSession:
    session = get_guide_controller().sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _guide_response(data) -> dict:
    return {"guide": data.model_dump(mode="json", by_alias=True)}


def _run(action):
    """Run a controller action, translating its errors to HTTP errors."""
    try:
        return action()
    except NoActiveGuideError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FlightEditorClosedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except PlanStoreError as e:
        logger.error(f"Plan store failure: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# Endpoints

@router.post("/session", response_model=CreateSessionResponse)
async def create_session():
    """Create a new session."""
    session = get_guide_controller().sessions.create()
    return CreateSessionResponse(session_id=session.session_id)


@router.post("/guide/{session_id}")
async def generate_guide(session_id: str, request: GenerateRequest):
    """Generate a travel guide for the session."""
    session = _get_session(session_id)
    try:
        data = await get_guide_controller().generate(
            session, request.params, request.media_description
        )
    except GuideGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _guide_response(data)


@router.get("/guide/{session_id}")
async def get_guide(session_id: str):
    """Get the session's active guide."""
    session = _get_session(session_id)
    if session.data is None:
        return {"guide": None, "message": "No guide generated yet"}
    return _guide_response(session.data)


@router.get("/guide/{session_id}/sections")
async def get_sections(session_id: str):
    """Get every section rendered for display."""
    session = _get_session(session_id)
    return _run(lambda: get_guide_controller().sections_view(session))


# Checklist

@router.post("/guide/{session_id}/days/{day_id}/items")
async def add_item(session_id: str, day_id: str):
    session = _get_session(session_id)
    return _guide_response(_run(lambda: get_guide_controller().add_item(session, day_id)))


@router.patch("/guide/{session_id}/days/{day_id}/items/{item_id}")
async def update_item(session_id: str, day_id: str, item_id: str, request: ItemUpdateRequest):
    session = _get_session(session_id)
    return _guide_response(_run(lambda: get_guide_controller().update_item(
        session, day_id, item_id, text=request.text, completed=request.completed
    )))


@router.delete("/guide/{session_id}/days/{day_id}/items/{item_id}")
async def delete_item(session_id: str, day_id: str, item_id: str):
    session = _get_session(session_id)
    return _guide_response(_run(lambda: get_guide_controller().delete_item(session, day_id, item_id)))


# Flight editor

@router.post("/guide/{session_id}/flights/edit", response_model=FlightDraftResponse)
async def open_flight_editor(session_id: str):
    """Open the flight editor with the rows of the current table."""
    session = _get_session(session_id)
    rows = _run(lambda: get_guide_controller().open_flight_editor(session))
    return FlightDraftResponse(rows=rows)


@router.post("/guide/{session_id}/flights/rows", response_model=FlightDraftResponse)
async def add_flight_row(session_id: str):
    session = _get_session(session_id)
    return FlightDraftResponse(rows=_run(lambda: get_guide_controller().add_flight_row(session)))


@router.patch("/guide/{session_id}/flights/rows/{index}", response_model=FlightDraftResponse)
async def update_flight_row(session_id: str, index: int, request: FlightRowUpdateRequest):
    session = _get_session(session_id)
    rows = _run(lambda: get_guide_controller().update_flight_row(
        session, index, **request.model_dump(exclude_none=True)
    ))
    return FlightDraftResponse(rows=rows)


@router.delete("/guide/{session_id}/flights/rows/{index}", response_model=FlightDraftResponse)
async def remove_flight_row(session_id: str, index: int):
    session = _get_session(session_id)
    return FlightDraftResponse(rows=_run(lambda: get_guide_controller().remove_flight_row(session, index)))


@router.post("/guide/{session_id}/flights/save")
async def save_flights(session_id: str):
    """Write the flight draft back into the accommodations section."""
    session = _get_session(session_id)
    return _guide_response(_run(lambda: get_guide_controller().save_flights(session)))


@router.delete("/guide/{session_id}/flights/edit")
async def cancel_flight_editor(session_id: str):
    session = _get_session(session_id)
    get_guide_controller().cancel_flight_editor(session)
    return {"success": True}


# Saved plans

@router.get("/plans")
async def list_plans():
    """List saved plans, most recent first."""
    plans = _run(lambda: get_guide_controller().plans.list())
    return {
        "plans": [
            {
                "id": plan.id,
                "name": plan.display_name,
                "created_at": plan.created_at,
            }
            for plan in plans
        ]
    }


@router.post("/plans")
async def save_plan(request: SavePlanRequest):
    """Save the session's active guide."""
    session = _get_session(request.session_id)
    plan = _run(lambda: get_guide_controller().save_plan(session, request.name))
    return {"success": True, "plan": {"id": plan.id, "name": plan.display_name}}


@router.put("/plans/{plan_id}")
async def rename_plan(plan_id: str, request: RenamePlanRequest):
    plan = _run(lambda: get_guide_controller().plans.rename(plan_id, request.name))
    if plan is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return {"success": True, "plan": {"id": plan.id, "name": plan.display_name}}


@router.delete("/plans/{plan_id}")
async def delete_plan(plan_id: str):
    if not _run(lambda: get_guide_controller().plans.delete(plan_id)):
        raise HTTPException(status_code=404, detail="Plan not found")
    return {"success": True}


@router.delete("/plans")
async def clear_plans():
    _run(lambda: get_guide_controller().plans.clear())
    return {"success": True}


@router.post("/plans/{plan_id}/load/{session_id}")
async def load_plan(plan_id: str, session_id: str):
    """Open a saved plan in a session."""
    session = _get_session(session_id)
    data = _run(lambda: get_guide_controller().load_plan(session, plan_id))
    if data is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return _guide_response(data)
