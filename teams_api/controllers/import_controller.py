# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: legacy local-storage import into an existing group."""
import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from teams_api.core.dependencies import get_group_service, get_import_reconciler
from teams_api.core.exceptions import GroupNotFound, MalformedSnapshot
from teams_api.core.logging import get_logger
from teams_api.schemas import ImportResponse
from teams_api.services.group_service import GroupService
from teams_api.services.import_reconciler import ImportReconciler

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Import"])


async def read_snapshot(request: Request) -> Any:
    """Decode the raw body; undecodable JSON is a malformed snapshot (400)."""
    raw = await request.body()
    try:
        return json.loads(raw)
    except ValueError as exc:
        logger.warning("Rejected import body that is not JSON: %s", exc)
        raise HTTPException(status_code=400, detail={
            "error": "Request body is not valid JSON",
            "errors": [{"loc": "body", "msg": str(exc)}],
        })


@router.post("/groups/{group_id}/import", response_model=ImportResponse,
             openapi_extra={"requestBody": {
                 "required": True,
                 "content": {"application/json": {"schema": {"type": "object"}}},
             }})
def import_legacy_data(group_id: str, snapshot: Any = Depends(read_snapshot),
                       groups: GroupService = Depends(get_group_service),
                       reconciler: ImportReconciler = Depends(get_import_reconciler)):
    try:
        groups.require_group(group_id)
    except GroupNotFound:
        raise HTTPException(status_code=404, detail="Group not found")
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc}")

    try:
        summary = reconciler.import_snapshot(group_id, snapshot)
    except MalformedSnapshot as exc:
        logger.warning("Rejected malformed snapshot group=%s: %s", group_id, exc.detail,
                       extra={"group_id": group_id})
        raise HTTPException(status_code=400, detail={"error": exc.detail, "errors": exc.errors})
    return ImportResponse(summary=summary, group_id=group_id)
