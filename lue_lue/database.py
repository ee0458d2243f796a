from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lue_lue.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign-key enforcement for every new SQLite connection.

    SQLite keeps the pragma per connection and ignores it inside an open
    transaction, so it has to be issued right after connecting.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, foreign_keys: bool = True) -> AsyncEngine:
    engine = create_async_engine(url, echo=False)
    if foreign_keys:
        enable_sqlite_foreign_keys(engine)
    return engine


engine = build_engine(settings.DATABASE_URL, settings.SQLITE_FOREIGN_KEYS)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """FastAPI dependency that yields an async database session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_session_factory() -> async_sessionmaker:
    """FastAPI dependency for handlers that open their own sessions."""
    return async_session
