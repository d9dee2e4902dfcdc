# groupboard/core/security.py
"""
Security module for authentication.
Handles password hashing and session token (JWT) creation/validation.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from groupboard.config import settings

# Password hashing context
# Argon2 is salted and deliberately slow; cost parameters are passlib's defaults
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# Claims carried by every session token, and nothing else besides iat/exp
CLAIM_KEYS = ("id", "username", "displayName")


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored hash.

    passlib compares digests in constant time, so a mismatch does not leak
    how much of the password was right.
    """
    return pwd_context.verify(plain, hashed)


def create_access_token(
    user_id: str,
    username: str,
    display_name: str,
    *,
    secret: str | None = None,
    expires_delta: dt.timedelta | None = None,
) -> str:
    """
    Create a signed session token.

    Args:
        user_id: User identifier (UUID string)
        username: Login name
        display_name: Name shown in the UI
        secret: Signing secret (defaults to the configured JWT_SECRET)
        expires_delta: Validity window (defaults to TOKEN_EXPIRE_HOURS)

    Returns:
        Encoded JWT token string

    Token payload includes:
        - id, username, displayName: identity claim
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    if expires_delta is None:
        expires_delta = dt.timedelta(hours=settings.token_expire_hours)
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "id": user_id,
        "username": username,
        "displayName": display_name,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm=settings.jwt_alg)


def decode_access_token(token: str, *, secret: str | None = None) -> dict:
    """
    Decode and validate a session token.

    Returns:
        Decoded payload (id, username, displayName, iat, exp)

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid, tampered or missing claims
    """
    payload = jwt.decode(
        token,
        secret or settings.jwt_secret,
        algorithms=[settings.jwt_alg],
        options={"require": ["exp", *CLAIM_KEYS]},
    )
    return payload
