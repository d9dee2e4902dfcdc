# groupboard/schemas/group.py
"""
Pydantic schemas for group endpoints.
"""
from pydantic import BaseModel


class CreateGroupIn(BaseModel):
    """Request body for creating a group."""
    name: str | None = None
    description: str | None = None
    photoUrl: str | None = None


class GroupIdIn(BaseModel):
    """Request body for join/leave."""
    groupId: str | None = None
