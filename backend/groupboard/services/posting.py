"""
Publishing posts and reading the posts of a user's groups.
"""
import datetime as dt
import logging

from groupboard.core.errors import ForbiddenError, ValidationError
from groupboard.models.post import Post
from groupboard.schemas.auth import Claims
from groupboard.services.membership import is_admin, load_group, load_user, parse_id

logger = logging.getLogger("uvicorn.error")


def as_utc(value: dt.datetime | None) -> dt.datetime | None:
    """Client datetimes without an offset are taken to be UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value


def feed_sort_key(post):
    """
    Newest-first key for a feed.

    Events sort by their event date, plain posts by creation date even when
    the client sent a date with them; creation date breaks ties so the order
    is total.
    """
    effective = post.date if post.is_event and post.date else post.creation_date
    return (effective, post.creation_date)


async def create_post(
    claims: Claims,
    group_id: str | None,
    name: str | None,
    description: str | None = None,
    is_event: bool = False,
    date: dt.datetime | None = None,
    location: str | None = None,
    photo_url: str | None = None,
) -> Post:
    """
    Publish a post in a group the caller administers.

    Checks run in this order and nothing is written unless all pass:
    required fields, group existence, caller is an admin of the group.

    Raises:
        ValidationError: missing group/name, or an event without date and location
        NotFoundError: group does not exist
        ForbiddenError: caller is not an admin of the group
    """
    if not group_id or not name or (is_event and (not date or not location)):
        raise ValidationError("Required fields are missing.")
    group = await load_group(parse_id(group_id))
    if not await is_admin(group, claims.id):
        raise ForbiddenError("You must be an admin to post in this group.")

    post = await Post.create(
        name=name,
        description=description,
        group=group,
        is_event=bool(is_event),
        date=as_utc(date),
        location=location,
        photo_url=photo_url,
        username=claims.username,
    )
    logger.info("[posts] user=%s posted %s in group=%s (event=%s)",
                claims.username, post.id, group.id, post.is_event)
    return post


async def posts_for_user(claims: Claims) -> list[Post]:
    """All posts of the caller's groups, newest first, with the group fetched."""
    user = await load_user(claims)
    group_ids = await user.groups.all().values_list("id", flat=True)
    if not group_ids:
        return []
    posts = await Post.filter(group_id__in=list(group_ids)).prefetch_related("group")
    return sorted(posts, key=feed_sort_key, reverse=True)
