import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lue_lue.errors import DatabaseQueryError

log = logging.getLogger(__name__)


class BaseRepository:
    """Holds the session and turns engine constraint failures into
    ``DatabaseQueryError`` (409)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _flush(self, received_data: Any = None) -> None:
        try:
            await self.db.flush()
        except IntegrityError as err:
            await self.db.rollback()
            log.warning("Constraint violation: %s", err.orig)
            raise DatabaseQueryError(
                str(err.orig), received_data, status_code=409
            ) from err

    async def _ensure_absent(self, model, id_: str, received_data: Any = None) -> None:
        if await self.db.get(model, id_) is not None:
            raise DatabaseQueryError(
                f"A {model.__tablename__} row with the id {id_} already exists",
                received_data,
                status_code=409,
            )
