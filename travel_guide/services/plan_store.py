"""
Saved-Plan Store.
Keeps saved guides, most recent first. Every change rewrites the whole
collection through a persistence backend.
"""
import json
import logging
import os
import tempfile
import threading
from datetime import date
from pathlib import Path
from typing import Optional, Protocol

from ..errors import PlanStoreError
from ..models.search_params import SearchParams
from ..models.travel import TravelData, now_ms

logger = logging.getLogger(__name__)


class PlanBackend(Protocol):
    """Whole-collection persistence."""

    def load(self) -> list[TravelData]: ...

    def store(self, plans: list[TravelData]) -> None: ...


class InMemoryPlanBackend:
    """Backend keeping plans in memory (tests and mock mode)."""

    def __init__(self, plans: Optional[list[TravelData]] = None):
        self._plans = [p.model_copy(deep=True) for p in plans or []]

    def load(self) -> list[TravelData]:
        return [p.model_copy(deep=True) for p in self._plans]

    def store(self, plans: list[TravelData]) -> None:
        self._plans = [p.model_copy(deep=True) for p in plans]


class JsonFilePlanBackend:
    """Backend storing plans as one JSON array on disk."""

    def __init__(self, path: str, legacy_paths: Optional[list[str]] = None):
        self.path = Path(path)
        self.legacy_paths = [Path(p) for p in legacy_paths or []]

    def _source(self) -> Optional[Path]:
        """File to read from: the current file, else the first legacy file found."""
        for candidate in [self.path, *self.legacy_paths]:
            if candidate.exists():
                return candidate
        return None

    def load(self) -> list[TravelData]:
        source = self._source()
        if source is None:
            return []
        if source != self.path:
            logger.info(f"Reading saved plans from legacy file {source}")

        try:
            with open(source, "r", encoding="utf-8") as f:
                raw = json.load(f)
            return [TravelData.model_validate(item) for item in raw]
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error reading saved plans from {source}: {e}")
            raise PlanStoreError(f"Could not read saved plans: {e}") from e

    def store(self, plans: list[TravelData]) -> None:
        payload = [p.model_dump(mode="json", by_alias=True) for p in plans]
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a temp file first so a failed write keeps the old file intact
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing saved plans to {self.path}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PlanStoreError(f"Could not write saved plans: {e}") from e


def _short_date(value: date) -> str:
    return f"{value.strftime('%b')} {value.day}"


def default_plan_name(params: SearchParams) -> str:
    """Suggested name, e.g. 'Lisbon Expedition (Mar 15 - Mar 20)'."""
    return (
        f"{params.destination} Expedition "
        f"({_short_date(params.check_in)} - {_short_date(params.check_out)})"
    )


class SavedPlanStore:
    """
    Saved guides, most recently saved first.

    Each mutation is a read-modify-write of the whole collection, done under
    a lock so concurrent requests cannot lose each other's updates.
    """

    def __init__(self, backend: PlanBackend):
        self.backend = backend
        self._lock = threading.Lock()

    def list(self) -> list[TravelData]:
        with self._lock:
            return self.backend.load()

    def get(self, plan_id: str) -> Optional[TravelData]:
        return next((p for p in self.list() if p.id == plan_id), None)

    def save(self, entry: TravelData, name: Optional[str] = None) -> TravelData:
        """Put a copy of the guide at the front, stamped with the save time."""
        plan = entry.model_copy(
            update={"custom_name": name or entry.custom_name, "created_at": now_ms()},
            deep=True
        )
        with self._lock:
            plans = [p for p in self.backend.load() if p.id != plan.id]
            self.backend.store([plan, *plans])
        logger.info(f"Saved plan {plan.id} as '{plan.display_name}'")
        return plan

    def rename(self, plan_id: str, new_name: str) -> Optional[TravelData]:
        with self._lock:
            plans = self.backend.load()
            renamed = None
            for i, plan in enumerate(plans):
                if plan.id == plan_id:
                    renamed = plan.model_copy(update={"custom_name": new_name})
                    plans[i] = renamed
            if renamed is None:
                return None
            self.backend.store(plans)
        return renamed

    def delete(self, plan_id: str) -> bool:
        with self._lock:
            plans = self.backend.load()
            remaining = [p for p in plans if p.id != plan_id]
            if len(remaining) == len(plans):
                return False
            self.backend.store(remaining)
        logger.info(f"Deleted plan {plan_id}")
        return True

    def clear(self):
        with self._lock:
            self.backend.store([])
        logger.info("Cleared all saved plans")


# Global store instance
plan_store: Optional[SavedPlanStore] = None


def get_plan_store() -> SavedPlanStore:
    """Get or create the global plan store."""
    global plan_store
    if plan_store is None:
        from ..config import settings
        plan_store = SavedPlanStore(
            JsonFilePlanBackend(settings.plans_file, settings.legacy_plans_files)
        )
    return plan_store
