"""School roster use cases (save, list, load, health)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from roster_api.domain.schools import META_FILE_NAME, ROSTER_FILE_NAME, build_metadata
from roster_api.repositories.drive_store import StoreError
from roster_api.repositories.roster_repository import RosterRepository

logger = logging.getLogger(__name__)

RESULT_OK = "ok"
RESULT_EMPTY = "empty"
RESULT_FAILED = "failed"


@dataclass
class StoreResult:
    """Outcome of a read that must tell "nothing there" apart from "store broke"."""

    status: str
    value: Any = field(default_factory=list)
    error: str = ""

    @property
    def failed(self) -> bool:
        return self.status == RESULT_FAILED

    @classmethod
    def of(cls, value: Any) -> "StoreResult":
        return cls(RESULT_OK if value else RESULT_EMPTY, value if value else [])

    @classmethod
    def failure(cls, exc: Exception) -> "StoreResult":
        return cls(RESULT_FAILED, [], str(exc))


class SchoolService:
    """Orchestrates the roster repository for the HTTP layer."""

    def __init__(self, repository: RosterRepository) -> None:
        self.repository = repository

    def root_id(self) -> str:
        """Resolve the root container; raises StoreError when it is unreachable."""
        return self.repository.resolve_root()

    def save_roster(self, school_name: str, students: list, now: Optional[datetime] = None) -> None:
        """Write the roster then its metadata. Raises StoreError on any store failure."""
        logger.info("save request: %s", school_name)
        root_id = self.repository.resolve_root()
        folder_id = self.repository.get_or_create_folder(school_name, root_id)
        self.repository.write_json(folder_id, ROSTER_FILE_NAME, students)
        self.repository.write_json(folder_id, META_FILE_NAME, build_metadata(school_name, now))
        logger.info("save success: %s (%d students)", school_name, len(students))

    def list_schools(self) -> StoreResult:
        try:
            root_id = self.repository.resolve_root()
            names = self.repository.list_folder_names(root_id)
        except StoreError as exc:
            logger.error("list error: %s", exc)
            return StoreResult.failure(exc)
        return StoreResult.of(names)

    def load_roster(self, school_name: str) -> StoreResult:
        # Looking a school up creates its folder when missing.
        try:
            root_id = self.repository.resolve_root()
            folder_id = self.repository.get_or_create_folder(school_name, root_id)
            students = self.repository.read_json(folder_id, ROSTER_FILE_NAME)
        except StoreError as exc:
            logger.error("load error for %s: %s", school_name, exc)
            return StoreResult.failure(exc)
        return StoreResult.of(students)
