import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Settings:
    # -------------------------------------------------------
    # Project
    # -------------------------------------------------------
    PROJECT_NAME: str = "Social Profile API"
    ENV: str = os.getenv("ENV", "dev")

    # -------------------------------------------------------
    # Database
    # -------------------------------------------------------
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./social.db"
    )

    # Hosted Postgres hands out postgres:// but SQLAlchemy needs postgresql://
    if DATABASE_URL.startswith("postgres://"):
        DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

    # -------------------------------------------------------
    # Authentication / JWT
    # -------------------------------------------------------
    SECRET_KEY: str = os.getenv(
        "SECRET_KEY",
        "supersecretlocalkey123"   # Only used for local dev
    )
    ALGORITHM: str = "HS256"

    # 1 day token expiry by default
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)
    )

    # Browser requests carry the token in this cookie
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "session")

    # -------------------------------------------------------
    # Profile page
    # -------------------------------------------------------
    DEFAULT_AVATAR_URL: str = os.getenv("DEFAULT_AVATAR_URL", "/noAvatar.png")
    DEFAULT_COVER_URL: str = os.getenv("DEFAULT_COVER_URL", "/noCover.png")

    FEED_PAGE_SIZE: int = int(os.getenv("FEED_PAGE_SIZE", 20))

    # -------------------------------------------------------
    # Logging
    # -------------------------------------------------------
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Single instance that is imported everywhere
settings = Settings()
