from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from roster_api.domain.schools import SaveRosterPayload
from roster_api.repositories.drive_store import StoreError
from roster_api.services.school_service import SchoolService, StoreResult

router = APIRouter(prefix="/schools", tags=["schools"])
logger = logging.getLogger(__name__)

STORE_STATUS_HEADER = "X-Store-Status"


def get_school_service(request: Request) -> SchoolService:
    svc = getattr(getattr(request.app, "state", None), "school_service", None)
    if not svc:
        raise RuntimeError("SchoolService not configured")
    return svc


def _invalid_payload() -> JSONResponse:
    return JSONResponse({"error": "Invalid payload"}, status_code=400)


def _result_response(result: StoreResult):
    # Read routes answer [] on store failures; the header tells the two apart.
    if result.failed:
        return JSONResponse([], headers={STORE_STATUS_HEADER: result.status})
    return JSONResponse(result.value, headers={STORE_STATUS_HEADER: result.status})


@router.post("/save")
async def save_school(request: Request):
    try:
        body = await request.json()
    except ValueError:
        return _invalid_payload()
    if not isinstance(body, dict):
        return _invalid_payload()
    try:
        payload = SaveRosterPayload.model_validate(body)
    except ValidationError:
        return _invalid_payload()

    svc = get_school_service(request)
    try:
        await run_in_threadpool(svc.save_roster, payload.school_name, payload.students)
    except StoreError as exc:
        logger.error("save error for %s: %s", payload.school_name, exc)
        return JSONResponse({"error": str(exc)}, status_code=500)
    return {"success": True}


@router.get("")
def list_schools(request: Request):
    return _result_response(get_school_service(request).list_schools())


@router.get("/{school_name:path}")
def get_school(school_name: str, request: Request):
    return _result_response(get_school_service(request).load_roster(school_name))
