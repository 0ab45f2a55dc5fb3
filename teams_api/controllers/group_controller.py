# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: group creation and read-only roster views."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from teams_api.core.dependencies import get_group_service
from teams_api.core.exceptions import AllocationFailure, GroupNotFound
from teams_api.models.domain import Event, Group, ShirtSet
from teams_api.schemas import GroupCreate, MembersOut
from teams_api.services.group_service import GroupService

router = APIRouter(prefix="/api", tags=["Groups"])


@router.post("/groups", status_code=201, response_model=Group)
def create_group(body: GroupCreate,
                 service: GroupService = Depends(get_group_service)):
    try:
        return service.create_group(body.name.strip(), body.club)
    except (AllocationFailure, SQLAlchemyError) as exc:
        raise HTTPException(status_code=503, detail=f"Database error: {exc}")


@router.get("/groups/{group_id}", response_model=Group)
def get_group(group_id: str, service: GroupService = Depends(get_group_service)):
    group = service.get_group(group_id)
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    return group


@router.get("/groups/{group_id}/members", response_model=MembersOut)
def list_members(group_id: str, service: GroupService = Depends(get_group_service)):
    try:
        return service.list_members(group_id)
    except GroupNotFound:
        raise HTTPException(status_code=404, detail="Group not found")


@router.get("/groups/{group_id}/events", response_model=List[Event])
def list_events(group_id: str, service: GroupService = Depends(get_group_service)):
    try:
        return service.list_events(group_id)
    except GroupNotFound:
        raise HTTPException(status_code=404, detail="Group not found")


@router.get("/groups/{group_id}/shirtsets", response_model=List[ShirtSet])
def list_shirt_sets(group_id: str, service: GroupService = Depends(get_group_service)):
    try:
        return service.list_shirt_sets(group_id)
    except GroupNotFound:
        raise HTTPException(status_code=404, detail="Group not found")
