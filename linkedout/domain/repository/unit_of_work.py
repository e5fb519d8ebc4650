"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Boundary of one write operation.

    Repository writes become durable only once ``commit`` returns. Use cases
    commit before building their response so that a failed commit reaches
    the caller.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes of the current operation durable.

        Raises:
            StorageUnavailableError: If the backing store rejects the commit
        """
        pass
