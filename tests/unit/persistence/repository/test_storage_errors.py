"""Unit tests for SQLAlchemy error translation in PostgreSQL repositories."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from linkedout.domain.error import StorageUnavailableError
from linkedout.domain.value import PostUrn, VoterId, VoteType
from linkedout.persistence.database import storage_errors
from linkedout.persistence.repository import (
    PostgresLeaderboardRepository,
    PostgresPostRepository,
    PostgresVoteRepository,
    SessionUnitOfWork,
)
from tests.conftest import make_post, make_vote


def failing_session(error: Exception) -> AsyncMock:
    session = AsyncMock()
    session.execute.side_effect = error
    return session


CONNECTION_LOST = OperationalError("SELECT 1", {}, Exception("connection refused"))


class TestStorageErrors:
    """Tests for the storage_errors context manager."""

    def test_translates_sqlalchemy_error(self):
        with pytest.raises(StorageUnavailableError) as exc_info:
            with storage_errors("post_repository.save"):
                raise CONNECTION_LOST

        assert exc_info.value.operation == "post_repository.save"
        assert exc_info.value.__cause__ is CONNECTION_LOST

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with storage_errors("post_repository.save"):
                raise KeyError("not a database error")


class TestPostgresRepositoriesTranslateErrors:
    """Every repository operation surfaces database failures uniformly."""

    @pytest.mark.asyncio
    async def test_post_find_by_urn(self):
        repo = PostgresPostRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.find_by_urn(PostUrn("1"))

    @pytest.mark.asyncio
    async def test_post_save(self):
        repo = PostgresPostRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.save(make_post())

    @pytest.mark.asyncio
    async def test_vote_save_integrity_error(self):
        error = IntegrityError("INSERT", {}, Exception("fk violation"))
        repo = PostgresVoteRepository(failing_session(error))

        with pytest.raises(StorageUnavailableError):
            await repo.save(make_vote(make_post(), "voter", VoteType.SOLID))

    @pytest.mark.asyncio
    async def test_vote_find_by_post_and_voter(self):
        repo = PostgresVoteRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.find_by_post_and_voter(make_post().id, VoterId("voter"))

    @pytest.mark.asyncio
    async def test_vote_update(self):
        repo = PostgresVoteRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.update(make_vote(make_post(), "voter", VoteType.SCAM))

    @pytest.mark.asyncio
    async def test_vote_count_by_post(self):
        repo = PostgresVoteRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.count_by_post(make_post().id)

    @pytest.mark.asyncio
    async def test_leaderboard_find_all(self):
        repo = PostgresLeaderboardRepository(failing_session(CONNECTION_LOST))

        with pytest.raises(StorageUnavailableError):
            await repo.find_all(vote_type=VoteType.GURU)

    @pytest.mark.asyncio
    async def test_post_conflict_without_stored_row(self):
        result = MagicMock()
        result.fetchone.return_value = None
        session = AsyncMock()
        session.execute.return_value = result
        repo = PostgresPostRepository(session)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.save(make_post())

        assert exc_info.value.operation == "post_repository.save"


class TestSessionUnitOfWork:
    """Tests for committing the request session."""

    @pytest.mark.asyncio
    async def test_commit_commits_session(self):
        session = AsyncMock()

        await SessionUnitOfWork(session).commit()

        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_raises_storage_unavailable(self):
        session = AsyncMock()
        session.commit.side_effect = CONNECTION_LOST

        with pytest.raises(StorageUnavailableError) as exc_info:
            await SessionUnitOfWork(session).commit()

        assert exc_info.value.operation == "session.commit"
