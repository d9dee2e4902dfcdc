# groupboard/models/user.py
"""
Database model for users.
Represents an account in the system: login credentials, display name and
the two membership views (groups joined, groups administered).
"""
import uuid
from typing import TYPE_CHECKING

from tortoise import fields, models

if TYPE_CHECKING:
    from groupboard.models.group import Group


class User(models.Model):
    """
    User database model.

    Relationships (both are reverse accessors of Group's many-to-many fields,
    so they always agree with the group side):
    - groups: Groups the user is a member of (Group.members)
    - board_groups: Groups the user administers (Group.admins)

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Username must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    display_name = fields.CharField(max_length=256)  # Name shown to other members
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    site_admin = fields.BooleanField(default=False)  # Reserved flag, not consulted by group access checks
    created_at = fields.DatetimeField(auto_now_add=True)

    groups: fields.ManyToManyRelation["Group"]
    board_groups: fields.ManyToManyRelation["Group"]

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

    def __str__(self) -> str:
        return self.username
