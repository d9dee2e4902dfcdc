"""
Group membership and authorization logic.

Membership is held once, in the group's ``members``/``admins`` link tables;
a user's ``groups``/``board_groups`` are the same rows seen from the user's
side. Operations that touch more than one row run in a transaction.

Invariant kept by every operation here: a group's admins are members.
"""
import logging
import uuid

from tortoise.transactions import in_transaction

from groupboard.core.errors import ConflictError, NotFoundError, ValidationError
from groupboard.models.group import Group
from groupboard.models.user import User
from groupboard.schemas.auth import Claims

logger = logging.getLogger("uvicorn.error")


def parse_id(value: str | None, label: str = "Group ID") -> uuid.UUID:
    """Parse a client-supplied id, raising ValidationError when missing or malformed."""
    if not value:
        raise ValidationError(f"{label} is required.")
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise ValidationError(f"{label} is malformed.") from exc


async def load_user(claims: Claims) -> User:
    """Load the caller's account; a valid token may outlive its user."""
    try:
        user_id = uuid.UUID(claims.id)
    except ValueError:
        user_id = None
    user = await User.get_or_none(id=user_id) if user_id else None
    if not user:
        raise NotFoundError("User not found.")
    return user


async def load_group(group_id: uuid.UUID) -> Group:
    group = await Group.get_or_none(id=group_id)
    if not group:
        raise NotFoundError("Group not found.")
    return group


async def is_member(group: Group, user_id) -> bool:
    return await group.members.filter(id=user_id).exists()


async def is_admin(group: Group, user_id) -> bool:
    return await group.admins.filter(id=user_id).exists()


async def create_group(
    claims: Claims,
    name: str | None,
    description: str | None,
    photo_url: str | None = None,
) -> Group:
    """
    Create a group with the caller as its first member and admin.

    The group row and both link rows are written in one transaction, so a
    failure never leaves a group its creator cannot see.
    """
    if not name or not description:
        raise ValidationError("Name and description are required.")
    user = await load_user(claims)
    async with in_transaction() as conn:
        group = await Group.create(
            name=name,
            description=description,
            photo_url=photo_url or None,
            using_db=conn,
        )
        await group.members.add(user, using_db=conn)
        await group.admins.add(user, using_db=conn)
    logger.info("[groups] user=%s created group=%s", user.username, group.id)
    return group


async def join_group(claims: Claims, group_id: str | None) -> Group:
    """
    Add the caller to a group's members.

    Raises:
        ValidationError: group id missing or malformed
        NotFoundError: group (or caller) does not exist
        ConflictError: caller is already a member; nothing is written
    """
    group = await load_group(parse_id(group_id))
    user = await load_user(claims)
    if await is_member(group, user.id):
        raise ConflictError("User is already a member of this group.")
    await group.members.add(user)
    logger.info("[groups] user=%s joined group=%s", user.username, group.id)
    return group


async def leave_group(claims: Claims, group_id: str | None) -> Group:
    """
    Remove the caller from a group.

    An admin leaving also gives up admin status. The last admin of a group
    cannot leave, since nobody could post there afterwards.

    Raises:
        ValidationError: group id missing or malformed
        NotFoundError: group (or caller) does not exist
        ConflictError: caller is not a member, or is the last admin
    """
    group = await load_group(parse_id(group_id))
    user = await load_user(claims)
    if not await is_member(group, user.id):
        raise ConflictError("User is not a member of this group.")

    was_admin = await is_admin(group, user.id)

    async with in_transaction() as conn:
        # Counted inside the transaction; two admins leaving at the same moment
        # under read-committed isolation can still both see a count of 2.
        if was_admin and await group.admins.all().using_db(conn).count() == 1:
            raise ConflictError("The last admin cannot leave this group.")
        await group.members.remove(user, using_db=conn)
        if was_admin:
            await group.admins.remove(user, using_db=conn)
    logger.info("[groups] user=%s left group=%s (admin=%s)", user.username, group.id, was_admin)
    return group


async def user_groups(claims: Claims) -> list[Group]:
    user = await load_user(claims)
    return await user.groups.all()


async def user_memberships(claims: Claims) -> tuple[list[Group], list[Group]]:
    """Return ``(board_groups, groups)`` for the caller."""
    user = await load_user(claims)
    board_groups = await user.board_groups.all()
    groups = await user.groups.all()
    return board_groups, groups


async def all_groups() -> list[Group]:
    return await Group.all()
