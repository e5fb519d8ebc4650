"""In-memory unit of work."""

from linkedout.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are applied immediately; commit has nothing to do."""

    async def commit(self) -> None:
        pass
