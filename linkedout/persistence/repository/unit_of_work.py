"""PostgreSQL implementation of UnitOfWork."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from linkedout.domain.repository import UnitOfWork
from linkedout.persistence.database import storage_errors


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session, surfacing failures as StorageUnavailableError."""
        with storage_errors("session.commit"):
            await self.session.commit()
        logfire.info("Session committed")
