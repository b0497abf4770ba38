"""Domain helpers for schools and their rosters."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

ROSTER_FILE_NAME = "students.json"
META_FILE_NAME = "meta.json"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
JSON_MIME_TYPE = "application/json"


class SaveRosterPayload(BaseModel):
    """Body of POST /schools/save. Student records are opaque."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    school_name: StrictStr = Field(alias="schoolName", min_length=1)
    students: list[Any]


def build_metadata(school_name: str, now: datetime | None = None) -> dict:
    """Return the meta.json document recording when a roster was uploaded."""
    moment = now or datetime.now(timezone.utc)
    return {
        "schoolName": school_name,
        "uploadedAt": moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
