from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging

from apps.okai.exceptions import StoreFailure

logger = logging.getLogger(__name__)


class StoreService:
    """Common plumbing for the OKAIgpt stores: one AsyncSession per request"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _execute(self, statement, action: str):
        """Run a statement, turning driver errors into StoreFailure"""
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            await self._fail(action, e)

    async def _commit(self, action: str) -> None:
        """Commit the unit of work, rolling everything back on failure"""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(action, e)

    async def _refresh(self, record, action: str) -> None:
        """Reload a committed record, turning driver errors into StoreFailure"""
        try:
            await self.db.refresh(record)
        except SQLAlchemyError as e:
            await self._fail(action, e)

    async def _fail(self, action: str, error: SQLAlchemyError):
        await self.db.rollback()
        logger.error(f"Failed to {action}: {error}")
        raise StoreFailure(f"Failed to {action}") from error
