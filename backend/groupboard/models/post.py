# groupboard/models/post.py
"""
Database model for posts.
A post is an announcement or, when ``is_event`` is set, a dated and located
event. Posts are created by group admins and never edited afterwards.
"""
import uuid
from tortoise import fields, models


class Post(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    name = fields.CharField(max_length=256)
    description = fields.TextField(null=True)
    group = fields.ForeignKeyField(
        "models.Group",
        related_name="posts",
        on_delete=fields.CASCADE
    )
    is_event = fields.BooleanField(default=False)
    date = fields.DatetimeField(null=True)  # Event date; required when is_event
    location = fields.CharField(max_length=512, null=True)  # Required when is_event
    photo_url = fields.CharField(max_length=1024, null=True)

    # Author's username at posting time (denormalized, not a foreign key)
    username = fields.CharField(max_length=256)
    creation_date = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "posts"
        ordering = ["creation_date"]
