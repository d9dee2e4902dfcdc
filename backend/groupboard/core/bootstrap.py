# groupboard/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the site admin account on first startup when configured to.
"""
import logging
from groupboard.config import settings
from groupboard.models.user import User
from groupboard.core.security import hash_password

logger = logging.getLogger("uvicorn.error")


async def ensure_site_admin() -> User | None:
    """
    If no site admin exists in the database, create one from settings.
    Only takes effect under the following conditions:
      - Currently no user with site_admin=True
      - And SITE_ADMIN_PASSWORD is set (to avoid using a default weak password)
    Settings used:
      SITE_ADMIN_USERNAME     (default: "admin")
      SITE_ADMIN_DISPLAY_NAME (default: "Site Admin")
      SITE_ADMIN_PASSWORD     (required, otherwise won't create)

    The site admin flag grants nothing inside groups; it is an account marker.
    """
    if await User.filter(site_admin=True).exists():
        return None

    if not settings.site_admin_password:
        logger.warning("[bootstrap] No site admin present, but SITE_ADMIN_PASSWORD not set -> skip creating one.")
        return None

    # Someone may already have registered the configured name as a regular account
    base_username = settings.site_admin_username
    username = base_username
    suffix = 1
    while await User.filter(username=username).exists():
        suffix += 1
        username = f"{base_username}{suffix}"

    u = await User.create(
        username=username,
        display_name=settings.site_admin_display_name,
        password_hash=hash_password(settings.site_admin_password),
        site_admin=True,
    )
    logger.warning("[bootstrap] Created site admin -> username=%s id=%s", u.username, u.id)
    return u
