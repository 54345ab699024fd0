"""Services for the travel guide."""
from .llm_client import LLMClient
from .guide_generator import GuideGenerator
from .guide_controller import GuideController
from .plan_store import SavedPlanStore

__all__ = [
    "LLMClient",
    "GuideGenerator",
    "GuideController",
    "SavedPlanStore",
]
