# groupboard/schemas/post.py
"""
Pydantic schemas for post endpoints.
"""
import datetime as dt
from pydantic import BaseModel


class CreatePostIn(BaseModel):
    """
    Request body for publishing a post.
    ``postName`` is the canonical field; ``name`` is accepted for older clients.
    """
    group: str | None = None
    postName: str | None = None
    name: str | None = None
    description: str | None = None
    isEvent: bool = False
    date: dt.datetime | None = None
    location: str | None = None
    photoUrl: str | None = None

    @property
    def title(self) -> str | None:
        return self.postName or self.name
