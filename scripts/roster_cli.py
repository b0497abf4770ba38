#!/usr/bin/env python3
"""
Inspect the roster store from the command line, using the same env vars as the API.

Usage:
  python scripts/roster_cli.py check
  python scripts/roster_cli.py list
  python scripts/roster_cli.py show --school "Lincoln High"
"""
from __future__ import annotations

import argparse
import json
from typing import Optional

from roster_api.core.config import ConfigurationMissing, get_settings
from roster_api.repositories.drive_store import DriveStore, StoreError
from roster_api.repositories.roots import root_resolver_for
from roster_api.repositories.roster_repository import RosterRepository
from roster_api.services.school_service import SchoolService


def build_service(store: Optional[DriveStore] = None) -> SchoolService:
    settings = get_settings()
    if store is None:
        settings.validate()
        store = DriveStore.from_settings(settings)
    return SchoolService(RosterRepository(store, root_resolver_for(settings, store)))


def run(args: argparse.Namespace, svc: SchoolService) -> None:
    if args.command == "check":
        print(svc.root_id())
        return
    result = svc.list_schools() if args.command == "list" else svc.load_roster(args.school)
    if result.failed:
        raise SystemExit(f"Drive error: {result.error}")
    if args.command == "list":
        for name in result.value:
            print(name)
    else:
        print(json.dumps(result.value, ensure_ascii=False, indent=2))


def main(argv: Optional[list[str]] = None, store: Optional[DriveStore] = None) -> None:
    ap = argparse.ArgumentParser(description="Inspect schools and rosters stored in Drive")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("check", help="Print the root container id")
    sub.add_parser("list", help="List school names")
    show = sub.add_parser("show", help="Print the roster of one school")
    show.add_argument("--school", required=True, help="School name (folder name)")
    args = ap.parse_args(argv)

    try:
        svc = build_service(store)
        run(args, svc)
    except ConfigurationMissing as exc:
        raise SystemExit(f"Invalid configuration: {exc}")
    except StoreError as exc:
        raise SystemExit(f"Drive error: {exc}")


if __name__ == "__main__":
    main()
