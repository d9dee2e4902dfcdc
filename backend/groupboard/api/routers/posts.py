# groupboard/api/routers/posts.py
from fastapi import APIRouter, Depends, status

from groupboard.api.deps import get_current_claims
from groupboard.schemas.auth import Claims
from groupboard.schemas.post import CreatePostIn
from groupboard.services import posting
from groupboard.services.views import post_view

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/user")
async def my_feed(claims: Claims = Depends(get_current_claims)):
    """
    Posts from every group the caller belongs to, newest first, each with its
    group inlined as ``{id, name, photoUrl}``.
    """
    posts = await posting.posts_for_user(claims)
    return {"posts": [post_view(p, expand_group=True) for p in posts]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(body: CreatePostIn, claims: Claims = Depends(get_current_claims)):
    """
    Publish a post in a group the caller administers.

    Errors:
        400: missing group/postName, or an event without date and location
        403: caller is not an admin of the group
        404: group does not exist
    """
    post = await posting.create_post(
        claims,
        body.group,
        body.title,
        description=body.description,
        is_event=body.isEvent,
        date=body.date,
        location=body.location,
        photo_url=body.photoUrl,
    )
    return {"message": "Post created successfully.", "post": post_view(post)}
