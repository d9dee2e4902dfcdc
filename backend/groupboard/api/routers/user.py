# groupboard/api/routers/user.py
from fastapi import APIRouter, Depends

from groupboard.api.deps import get_current_claims
from groupboard.schemas.auth import Claims
from groupboard.services import membership
from groupboard.services.views import group_views

router = APIRouter(prefix="/user", tags=["user"])


@router.get("")
async def user_dashboard(claims: Claims = Depends(get_current_claims)):
    """
    Groups the caller administers (``boardGroups``) and belongs to (``groups``),
    both as full group records.
    """
    board_groups, groups = await membership.user_memberships(claims)
    return {
        "boardGroups": await group_views(board_groups),
        "groups": await group_views(groups),
    }
