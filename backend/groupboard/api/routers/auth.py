# groupboard/api/routers/auth.py
from fastapi import APIRouter, Depends, Response, status

from groupboard.api.deps import get_current_claims
from groupboard.config import settings
from groupboard.schemas.auth import Claims, LoginRequest, RegisterIn
from groupboard.services import accounts

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new user account.

    Args:
        body: username (unique), displayName, password (hashed before storage)

    Returns:
        dict: {"message": ...}

    Errors:
        400: missing field or username already taken
    """
    await accounts.register_user(body.username, body.displayName, body.password)
    return {"message": "User registered successfully."}


@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate and start a session.

    On success the session token is set as an HttpOnly cookie valid for the
    token lifetime (one day by default). The token is not part of the body.

    Returns:
        dict: {"message": ..., "displayName": ...}

    Errors:
        404: unknown username
        401: wrong password
    """
    user, token = await accounts.authenticate(payload.username, payload.password)
    response.set_cookie(
        settings.auth_cookie_name,
        token,
        max_age=settings.token_expire_hours * 3600,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return {"message": "Login successful.", "displayName": user.display_name}


@router.post("/verify")
async def verify(claims: Claims = Depends(get_current_claims)):
    """Return the identity carried by the session token."""
    return claims.model_dump()


@router.post("/logout")
async def logout(response: Response):
    """
    Log out by clearing the session cookie.

    Note:
        Sessions are stateless, so a copied token stays valid until it
        expires. There is no server-side revocation.
    """
    response.delete_cookie(
        settings.auth_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return {"message": "Logout successful."}
