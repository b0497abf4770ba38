"""Folder-per-school persistence on top of the Drive store."""
from __future__ import annotations

from typing import Any

from roster_api.repositories.drive_store import DriveStore
from roster_api.repositories.roots import RootResolver


class RosterRepository:
    """Maps schools and rosters onto folders and JSON files.

    Nothing here is transactional. Two concurrent callers creating the same
    folder can both succeed and leave duplicate folders behind; the first
    search match is the one used afterwards.
    """

    def __init__(self, store: DriveStore, root: RootResolver) -> None:
        self.store = store
        self.root = root

    def resolve_root(self) -> str:
        return self.root.resolve()

    def get_or_create_folder(self, name: str, parent_id: str) -> str:
        folder_id = self.store.find_first(name=name, parent_id=parent_id, folders_only=True)
        if folder_id:
            return folder_id
        return self.store.create_folder(name, parent_id)

    def write_json(self, parent_id: str, file_name: str, data: Any) -> None:
        """Replace ``file_name`` under ``parent_id`` with ``data``.

        The existing file is deleted before the new one is created, so a
        failure in between leaves no file at all until the next write.
        """
        existing = self.store.find_first(name=file_name, parent_id=parent_id)
        if existing:
            self.store.delete(existing)
        self.store.create_json_file(file_name, parent_id, data)

    def read_json(self, parent_id: str, file_name: str) -> Any:
        """Return the decoded file, or an empty list when it does not exist."""
        file_id = self.store.find_first(name=file_name, parent_id=parent_id)
        if not file_id:
            return []
        return self.store.download_json(file_id)

    def list_folder_names(self, parent_id: str) -> list[str]:
        folders = self.store.search(parent_id=parent_id, folders_only=True, fields="id, name")
        return [folder["name"] for folder in folders]
