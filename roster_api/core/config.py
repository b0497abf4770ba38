"""
Configuration helpers for the roster service.

Every setting is read from the environment here so that routers, services and
the Drive adapter receive an explicit Settings object instead of touching
os.environ.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import json
import os

ROOT_MODE_SHARED_DRIVE = "shared_drive"
ROOT_MODE_FOLDER_NAME = "folder_name"
ROOT_MODES = {ROOT_MODE_SHARED_DRIVE, ROOT_MODE_FOLDER_NAME}


class ConfigurationMissing(Exception):
    """Raised when a required setting is absent or unusable."""


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    service_account_json: str
    root_mode: str
    shared_drive_id: str
    root_folder_name: str
    host: str
    port: int
    log_level: str
    cors_origins: tuple[str, ...]

    @property
    def uses_shared_drive(self) -> bool:
        return self.root_mode == ROOT_MODE_SHARED_DRIVE

    def service_account_info(self) -> dict:
        """Decode the credential blob, failing loudly when it is missing or broken."""
        raw = (self.service_account_json or "").strip()
        if not raw:
            raise ConfigurationMissing("GOOGLE_SERVICE_ACCOUNT_JSON missing")
        try:
            info = json.loads(raw)
        except ValueError as exc:
            raise ConfigurationMissing(f"GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON: {exc}") from exc
        if not isinstance(info, dict):
            raise ConfigurationMissing("GOOGLE_SERVICE_ACCOUNT_JSON must be a JSON object")
        return info

    def validate(self) -> None:
        """Check everything the service needs before it starts serving."""
        if self.root_mode not in ROOT_MODES:
            raise ConfigurationMissing(
                f"DRIVE_ROOT_MODE must be one of {sorted(ROOT_MODES)}, got {self.root_mode!r}"
            )
        self.service_account_info()
        if self.uses_shared_drive and not self.shared_drive_id:
            raise ConfigurationMissing("SHARED_DRIVE_ID missing")
        if not self.uses_shared_drive and not self.root_folder_name:
            raise ConfigurationMissing("ROOT_FOLDER_NAME missing")


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip() for item in (value or "").split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        service_account_json=os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON", ""),
        root_mode=(os.getenv("DRIVE_ROOT_MODE") or ROOT_MODE_SHARED_DRIVE).strip().lower(),
        shared_drive_id=(os.getenv("SHARED_DRIVE_ID") or "").strip(),
        root_folder_name=(os.getenv("ROOT_FOLDER_NAME") or "Schools").strip(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "4000"), 4000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_csv(os.getenv("CORS_ORIGINS", "*")) or ("*",),
    )
