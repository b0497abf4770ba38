"""Entry points for the school roster API."""
from roster_api.app import create_app

__all__ = ["create_app"]
