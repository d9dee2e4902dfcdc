"""
Account operations: registration and credential verification.
"""
import logging

from tortoise.exceptions import IntegrityError

from groupboard.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from groupboard.core.security import create_access_token, hash_password, verify_password
from groupboard.models.user import User

logger = logging.getLogger("uvicorn.error")


async def register_user(username: str | None, display_name: str | None, password: str | None) -> User:
    """
    Create a new account.

    Raises:
        ValidationError: any field missing or empty
        ConflictError: username already taken
    """
    if not username or not display_name or not password:
        raise ValidationError("All fields are required.")
    if await User.filter(username=username).exists():
        raise ConflictError("Username already exists.")
    try:
        user = await User.create(
            username=username,
            display_name=display_name,
            password_hash=hash_password(password),
            site_admin=False,
        )
    except IntegrityError as exc:
        # Lost a race against a concurrent registration; the unique index decides
        raise ConflictError("Username already exists.") from exc
    logger.info("[auth] registered user=%s id=%s", user.username, user.id)
    return user


async def authenticate(username: str | None, password: str | None) -> tuple[User, str]:
    """
    Check credentials and issue a session token.

    Returns:
        (user, token)

    Raises:
        ValidationError: username or password missing
        NotFoundError: no such username
        AuthError: wrong password
    """
    if not username or not password:
        raise ValidationError("Username and password are required.")
    user = await User.get_or_none(username=username)
    if not user:
        raise NotFoundError("User not found.")
    if not verify_password(password, user.password_hash):
        logger.info("[auth] rejected login for user=%s", username)
        raise AuthError("Invalid credentials.")
    token = create_access_token(str(user.id), user.username, user.display_name)
    return user, token
