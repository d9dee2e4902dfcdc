# groupboard/models/group.py
"""
Database model for community groups.

Membership is stored once, in the ``group_members`` / ``group_admins`` link
tables. ``User.groups`` and ``User.board_groups`` read the same rows from the
other side, so a join or leave is a single write.
"""
import uuid
from typing import TYPE_CHECKING

from tortoise import fields, models

if TYPE_CHECKING:
    from groupboard.models.post import Post
    from groupboard.models.user import User


class Group(models.Model):
    """
    Group database model.

    Relationships:
    - members: Users belonging to the group (many-to-many, reverse "groups")
    - admins: Users allowed to post; always a subset of members
      (many-to-many, reverse "board_groups")
    - posts: Posts published in the group (one-to-many, via Post.group)
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    description = fields.TextField()
    photo_url = fields.CharField(max_length=1024, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    members: fields.ManyToManyRelation["User"] = fields.ManyToManyField(
        "models.User", related_name="groups", through="group_members"
    )
    admins: fields.ManyToManyRelation["User"] = fields.ManyToManyField(
        "models.User", related_name="board_groups", through="group_admins"
    )

    posts: fields.ReverseRelation["Post"]

    class Meta:
        table = "groups"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return self.name
