import os
from typing import List, NamedTuple

import dotenv

dotenv.load_dotenv()

DEFAULT_DB_URL = "sqlite+aiosqlite:///./blog.db"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:4200",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:4200",
]


class BlogSettings(NamedTuple):
    db_url: str
    log_level: str
    cors_origins: List[str]
    sql_echo: bool


def _as_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_log_level(value: str | None) -> str:
    level = (value or "INFO").strip().upper()
    # Unknown names would make logging.setLevel raise
    return level if level in LOG_LEVELS else "INFO"


def _as_list(value: str | None, default: List[str]) -> List[str]:
    if not value:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


def load_settings() -> BlogSettings:
    """
    Reads blog settings from the environment (a .env file is loaded first).

    Example .env:
    DB_URL=sqlite+aiosqlite:///./blog.db
    BLOG_LOG_LEVEL=DEBUG
    BLOG_CORS_ORIGINS=http://localhost:3000,http://localhost:4200
    BLOG_SQL_ECHO=true
    """
    return BlogSettings(
        db_url=os.environ.get("DB_URL", DEFAULT_DB_URL),
        log_level=_as_log_level(os.environ.get("BLOG_LOG_LEVEL")),
        cors_origins=_as_list(
            os.environ.get("BLOG_CORS_ORIGINS"), DEFAULT_CORS_ORIGINS
        ),
        sql_echo=_as_bool(os.environ.get("BLOG_SQL_ECHO")),
    )
