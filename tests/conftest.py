from __future__ import annotations

import itertools
import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the roster_api package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster_api.app import create_app  # noqa: E402
from roster_api.core import config as core_config  # noqa: E402
from roster_api.core.config import Settings  # noqa: E402
from roster_api.domain.schools import FOLDER_MIME_TYPE  # noqa: E402
from roster_api.repositories.drive_store import StoreOperationFailed  # noqa: E402

SHARED_DRIVE_ID = "drive-root"


class FakeDriveStore:
    """In-memory stand-in for DriveStore, keyed by file id."""

    def __init__(self) -> None:
        self.files: dict[str, dict] = {}
        self.mutations: list[tuple] = []
        self.fail_with: str | None = None
        self._ids = itertools.count(1)

    def _check(self) -> None:
        if self.fail_with:
            raise StoreOperationFailed(self.fail_with)

    def add(self, name: str, parent_id: str | None, *, folder: bool = False, content=None) -> str:
        file_id = f"id{next(self._ids)}"
        self.files[file_id] = {
            "id": file_id,
            "name": name,
            "parents": [parent_id] if parent_id else [],
            "mimeType": FOLDER_MIME_TYPE if folder else "application/json",
            "content": None if content is None else json.dumps(content),
        }
        return file_id

    def search(self, *, name=None, parent_id=None, folders_only=False, fields="id, name"):
        self._check()
        found = []
        for item in self.files.values():
            if name is not None and item["name"] != name:
                continue
            if parent_id is not None and parent_id not in item["parents"]:
                continue
            if folders_only and item["mimeType"] != FOLDER_MIME_TYPE:
                continue
            found.append({"id": item["id"], "name": item["name"]})
        return found

    def find_first(self, *, name, parent_id=None, folders_only=False):
        matches = self.search(name=name, parent_id=parent_id, folders_only=folders_only)
        return matches[0]["id"] if matches else None

    def create_folder(self, name, parent_id):
        self._check()
        self.mutations.append(("create_folder", name, parent_id))
        return self.add(name, parent_id, folder=True)

    def create_json_file(self, name, parent_id, data):
        self._check()
        self.mutations.append(("create_file", name, parent_id))
        return self.add(name, parent_id, content=data)

    def delete(self, file_id):
        self._check()
        self.mutations.append(("delete", file_id))
        del self.files[file_id]

    def download_json(self, file_id):
        self._check()
        return json.loads(self.files[file_id]["content"])

    def children(self, parent_id, name=None):
        return [f for f in self.files.values() if parent_id in f["parents"] and (name is None or f["name"] == name)]


def make_settings(**overrides) -> Settings:
    values = dict(
        app_env="test",
        service_account_json='{"type": "service_account"}',
        root_mode=core_config.ROOT_MODE_SHARED_DRIVE,
        shared_drive_id=SHARED_DRIVE_ID,
        root_folder_name="Schools",
        host="127.0.0.1",
        port=4000,
        log_level="WARNING",
        cors_origins=("*",),
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def store() -> FakeDriveStore:
    return FakeDriveStore()


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def clean_settings_cache():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def settings_factory():
    return make_settings
