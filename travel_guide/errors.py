"""Errors raised at the service boundaries (AI generation, plan persistence)."""


class GuideGenerationError(Exception):
    """The AI guide could not be generated."""


class PlanStoreError(Exception):
    """Saved plans could not be read or written."""


class NoActiveGuideError(Exception):
    """The session has no generated or loaded guide yet."""


class FlightEditorClosedError(Exception):
    """A flight draft edit was attempted without opening the editor."""
