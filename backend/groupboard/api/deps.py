# groupboard/api/deps.py
import jwt
from fastapi import Header, Request

from groupboard.config import settings
from groupboard.core.errors import AuthError
from groupboard.core.security import decode_access_token
from groupboard.schemas.auth import Claims


async def get_current_claims(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Claims:
    """
    FastAPI dependency yielding the identity of the caller.

    The session token is taken from either:
    1. Authorization header (Bearer token)
    2. HttpOnly cookie (authToken) - what browsers send

    Only the token is checked (signature and expiry); the user record is not
    loaded here. Routes that need it load it and report 404 themselves.

    Raises:
        AuthError (401): "Unauthorized." when no token is present,
            "Invalid token." when it is malformed, tampered or expired
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    if not token:
        token = request.cookies.get(settings.auth_cookie_name)

    if not token:
        raise AuthError("Unauthorized.")

    try:
        payload = decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        raise AuthError("Invalid token.") from exc

    return Claims(
        id=str(payload["id"]),
        username=payload["username"],
        displayName=payload["displayName"],
    )
