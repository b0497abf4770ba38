"""Strategies for locating the root container that holds every school folder."""
from __future__ import annotations

from roster_api.core.config import Settings
from roster_api.repositories.drive_store import DriveStore, RootNotFound


class RootResolver:
    """Returns the id of the root container."""

    def resolve(self) -> str:
        raise NotImplementedError


class ConfiguredRoot(RootResolver):
    """Root supplied by configuration (a shared drive id); no store call is made."""

    def __init__(self, root_id: str) -> None:
        self.root_id = root_id

    def resolve(self) -> str:
        return self.root_id


class NamedRoot(RootResolver):
    """Root discovered by searching the store for a folder with a fixed name."""

    def __init__(self, store: DriveStore, folder_name: str) -> None:
        self.store = store
        self.folder_name = folder_name

    def resolve(self) -> str:
        folder_id = self.store.find_first(name=self.folder_name, folders_only=True)
        if not folder_id:
            raise RootNotFound(f"Root folder {self.folder_name!r} not found")
        return folder_id


def root_resolver_for(settings: Settings, store: DriveStore) -> RootResolver:
    if settings.uses_shared_drive:
        return ConfiguredRoot(settings.shared_drive_id)
    return NamedRoot(store, settings.root_folder_name)
