from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from roster_api.repositories.drive_store import StoreError
from roster_api.routers.schools import get_school_service

router = APIRouter(tags=["health"])


@router.get("/health-check")
def health_check(request: Request):
    try:
        root_id = get_school_service(request).root_id()
    except StoreError as exc:
        return JSONResponse({"error": str(exc)}, status_code=500)
    return {"success": True, "rootId": root_id}


@router.get("/drive-test")
def drive_test(request: Request):
    try:
        root_id = get_school_service(request).root_id()
    except StoreError as exc:
        return JSONResponse({"error": str(exc)}, status_code=500)
    return {"success": True, "message": "Drive root ready", "driveId": root_id}
