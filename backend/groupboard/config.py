# groupboard/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Groupboard API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3009"))

    # CORS origins for frontend (cookies are sent cross-origin, so no wildcard)
    CORS_ORIGINS: list[str] = _split_origins(
        os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000")
    )

    # Session token settings
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    jwt_alg: str = "HS256"
    token_expire_hours: int = int(os.getenv("TOKEN_EXPIRE_HOURS", "24"))
    auth_cookie_name: str = os.getenv("AUTH_COOKIE_NAME", "authToken")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")

    # Optional site admin created on first startup
    site_admin_username: str = os.getenv("SITE_ADMIN_USERNAME", "admin")
    site_admin_display_name: str = os.getenv("SITE_ADMIN_DISPLAY_NAME", "Site Admin")
    site_admin_password: str | None = os.getenv("SITE_ADMIN_PASSWORD")

    @property
    def is_production(self) -> bool:
        return self.env == "production"


settings = Settings()  # Instantiate configuration
