# groupboard/api/routers/groups.py
from fastapi import APIRouter, Depends, status

from groupboard.api.deps import get_current_claims
from groupboard.schemas.auth import Claims
from groupboard.schemas.group import CreateGroupIn, GroupIdIn
from groupboard.services import membership
from groupboard.services.views import group_view, group_views

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("")
async def list_groups():
    """Every group, unauthenticated and unpaginated."""
    return {"groups": await group_views(await membership.all_groups())}


@router.get("/user")
async def list_my_groups(claims: Claims = Depends(get_current_claims)):
    """Groups the caller is a member of."""
    return {"groups": await group_views(await membership.user_groups(claims))}


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_group(body: CreateGroupIn, claims: Claims = Depends(get_current_claims)):
    """
    Create a group; the caller becomes its first member and admin.

    Returns:
        dict: {"message": ..., "group": group record}
    """
    group = await membership.create_group(claims, body.name, body.description, body.photoUrl)
    return {"message": "Group created successfully.", "group": await group_view(group)}


@router.post("/join")
async def join_group(body: GroupIdIn, claims: Claims = Depends(get_current_claims)):
    await membership.join_group(claims, body.groupId)
    return {"message": "User joined the group successfully."}


@router.post("/leave")
async def leave_group(body: GroupIdIn, claims: Claims = Depends(get_current_claims)):
    await membership.leave_group(claims, body.groupId)
    return {"message": "User left the group successfully."}
