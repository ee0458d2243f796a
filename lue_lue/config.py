import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Hosted environments set DATABASE_URL and PORT without a prefix -- map them
# to the LUE_-prefixed names that pydantic-settings expects.
if "DATABASE_URL" in os.environ and "LUE_DATABASE_URL" not in os.environ:
    _url = os.environ["DATABASE_URL"]
    if _url.startswith("sqlite:///"):
        _url = _url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    os.environ["LUE_DATABASE_URL"] = _url

if "PORT" in os.environ and "LUE_PORT" not in os.environ:
    os.environ["LUE_PORT"] = os.environ["PORT"]

# alembic/ lives next to the package in the repository root
_ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./lue_lue.db"
    SQLITE_FOREIGN_KEYS: bool = True
    MIGRATE_ON_STARTUP: bool = True
    ALEMBIC_SCRIPT_LOCATION: str = str(_ALEMBIC_DIR)
    SSE_INTERVAL_SECONDS: float = 30.0
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "LUE_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
