"""
JSON views of stored records.

Routes return these plain dicts; FastAPI's encoder takes care of UUIDs and
datetimes.
"""
from groupboard.models.group import Group
from groupboard.models.post import Post


async def group_view(group: Group) -> dict:
    """
    Full group record with member, admin and post ids.

    Posts are listed in creation order (the order they were published).
    """
    await group.fetch_related("members", "admins", "posts")
    posts = sorted(group.posts, key=lambda p: p.creation_date)
    return {
        "id": str(group.id),
        "name": group.name,
        "description": group.description,
        "photoUrl": group.photo_url,
        "members": [str(u.id) for u in group.members],
        "admins": [str(u.id) for u in group.admins],
        "posts": [str(p.id) for p in posts],
        "createdAt": group.created_at,
    }


async def group_views(groups: list[Group]) -> list[dict]:
    return [await group_view(g) for g in groups]


def post_view(post: Post, expand_group: bool = False) -> dict:
    """
    Post record. With ``expand_group`` the owning group must already be
    fetched (select_related/prefetch_related) and is inlined as
    ``{id, name, photoUrl}``.
    """
    if expand_group:
        group = {"id": str(post.group.id), "name": post.group.name, "photoUrl": post.group.photo_url}
    else:
        group = str(post.group_id)
    return {
        "id": str(post.id),
        "name": post.name,
        "description": post.description,
        "group": group,
        "isEvent": post.is_event,
        "date": post.date,
        "location": post.location,
        "photoUrl": post.photo_url,
        "username": post.username,
        "creationDate": post.creation_date,
    }
