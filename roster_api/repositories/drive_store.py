"""
Google Drive v3 adapter.

Exposes the handful of primitives the roster repository needs (search,
create folder, create JSON file, delete, download) and hides the shared-drive
flags that every Drive call has to carry.
"""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiError
from googleapiclient.http import MediaIoBaseUpload

from roster_api.core.config import Settings
from roster_api.domain.schools import FOLDER_MIME_TYPE, JSON_MIME_TYPE

DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for the remote store."""


class StoreOperationFailed(StoreError):
    """Raised when a Drive call fails; carries the underlying message."""


class RootNotFound(StoreError):
    """Raised when the root folder cannot be located by name."""


def quote(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query literal."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def build_drive_service(settings: Settings):
    credentials = service_account.Credentials.from_service_account_info(
        settings.service_account_info(), scopes=DRIVE_SCOPES
    )
    return build("drive", "v3", credentials=credentials, cache_discovery=False)


class DriveStore:
    """Thin wrapper around a googleapiclient Drive resource."""

    def __init__(self, service, shared_drive_id: str = "") -> None:
        self.service = service
        self.shared_drive_id = shared_drive_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "DriveStore":
        drive_id = settings.shared_drive_id if settings.uses_shared_drive else ""
        return cls(build_drive_service(settings), shared_drive_id=drive_id)

    def _list_scope(self) -> dict:
        if self.shared_drive_id:
            return {
                "corpora": "drive",
                "driveId": self.shared_drive_id,
                "includeItemsFromAllDrives": True,
                "supportsAllDrives": True,
            }
        return {"corpora": "user", "supportsAllDrives": True}

    def _execute(self, request, action: str):
        try:
            return request.execute()
        except (GoogleApiError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as exc:
            raise StoreOperationFailed(f"{action} failed: {exc}") from exc

    # -------------------------- search --------------------------
    def search(self, *, name: Optional[str] = None, parent_id: Optional[str] = None,
               folders_only: bool = False, fields: str = "id, name") -> list[dict]:
        """Return every non-trashed item matching the filters, following page tokens."""
        clauses = ["trashed = false"]
        if name is not None:
            clauses.append(f"name = {quote(name)}")
        if parent_id is not None:
            clauses.append(f"{quote(parent_id)} in parents")
        if folders_only:
            clauses.append(f"mimeType = {quote(FOLDER_MIME_TYPE)}")
        query = " and ".join(clauses)

        items: list[dict] = []
        page_token = None
        while True:
            params = dict(self._list_scope(), q=query, fields=f"nextPageToken, files({fields})")
            if page_token:
                params["pageToken"] = page_token
            response = self._execute(self.service.files().list(**params), "list files")
            items.extend(response.get("files", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def find_first(self, *, name: str, parent_id: Optional[str] = None,
                   folders_only: bool = False) -> Optional[str]:
        matches = self.search(name=name, parent_id=parent_id, folders_only=folders_only, fields="id")
        return matches[0]["id"] if matches else None

    # -------------------------- mutations --------------------------
    def create_folder(self, name: str, parent_id: str) -> str:
        body = {"name": name, "mimeType": FOLDER_MIME_TYPE, "parents": [parent_id]}
        created = self._execute(
            self.service.files().create(body=body, fields="id", supportsAllDrives=True),
            f"create folder {name!r}",
        )
        logger.info("created folder %r (%s) under %s", name, created["id"], parent_id)
        return created["id"]

    def create_json_file(self, name: str, parent_id: str, data: Any) -> str:
        payload = json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
        media = MediaIoBaseUpload(io.BytesIO(payload), mimetype=JSON_MIME_TYPE, resumable=False)
        body = {"name": name, "parents": [parent_id], "mimeType": JSON_MIME_TYPE}
        created = self._execute(
            self.service.files().create(body=body, media_body=media, fields="id", supportsAllDrives=True),
            f"upload {name!r}",
        )
        return created["id"]

    def delete(self, file_id: str) -> None:
        self._execute(
            self.service.files().delete(fileId=file_id, supportsAllDrives=True),
            f"delete {file_id}",
        )

    # -------------------------- reads --------------------------
    def download_json(self, file_id: str) -> Any:
        content = self._execute(
            self.service.files().get_media(fileId=file_id, supportsAllDrives=True),
            f"download {file_id}",
        )
        if isinstance(content, bytes):
            content = content.decode("utf-8")
        try:
            return json.loads(content)
        except ValueError as exc:
            raise StoreOperationFailed(f"file {file_id} is not valid JSON: {exc}") from exc
