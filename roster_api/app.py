from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster_api.core.config import Settings, get_settings
from roster_api.core.logging_service import init_logging
from roster_api.repositories.drive_store import DriveStore
from roster_api.repositories.roots import root_resolver_for
from roster_api.repositories.roster_repository import RosterRepository
from roster_api.routers import health as health_router
from roster_api.routers import schools as schools_router
from roster_api.services.school_service import SchoolService


def create_app(settings: Optional[Settings] = None, store: Optional[DriveStore] = None) -> FastAPI:
    """Build the API. Without ``store`` a Drive client is created from the settings.

    Raises ConfigurationMissing when credentials or the root id are absent.
    """
    settings = settings or get_settings()
    init_logging(settings.log_level)
    if store is None:
        settings.validate()
        store = DriveStore.from_settings(settings)

    app = FastAPI(title="School Roster API")
    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    repository = RosterRepository(store, root_resolver_for(settings, store))
    app.state.settings = settings
    app.state.school_service = SchoolService(repository)

    app.include_router(health_router.router)
    app.include_router(schools_router.router)
    return app
