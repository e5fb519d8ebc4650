"""PostgreSQL implementation of Vote repository.

Besides the votes table this repository keeps the leaderboard counter table
in step with every insert and category change, inside the same session and
therefore the same transaction.
"""

from typing import List, Optional

import logfire
from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from linkedout.domain.error import StorageUnavailableError
from linkedout.domain.model import Vote, VoteCount
from linkedout.domain.repository import VoteRepository
from linkedout.domain.value import PostId, VoterId, VoteType
from linkedout.persistence.database import storage_errors
from linkedout.persistence.mappers import row_to_vote, vote_to_dict
from linkedout.persistence.tables import COUNT_COLUMNS, leaderboard_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_voter(
        self, post_id: PostId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find a voter's vote on a post."""
        with storage_errors("vote_repository.find_by_post_and_voter"):
            stmt = select(votes_table).where(
                and_(
                    votes_table.c.post_id == post_id,
                    votes_table.c.voter_id == voter_id.root,
                )
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote and count it, or return the voter's existing vote."""
        with logfire.span("vote_repository.save", post_id=str(vote.post_id)):
            with storage_errors("vote_repository.save"):
                stmt = (
                    insert(votes_table)
                    .values(**vote_to_dict(vote))
                    .on_conflict_do_nothing(
                        index_elements=[votes_table.c.post_id, votes_table.c.voter_id]
                    )
                    .returning(votes_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if row:
                    await self._bump_counters(vote.post_id, {vote.vote_type: 1})
                    await self.session.flush()
                    return row_to_vote(row._asdict())

            logfire.info(
                "Vote conflict, reading stored row",
                post_id=str(vote.post_id),
                voter_id=str(vote.voter_id),
            )
            existing = await self.find_by_post_and_voter(vote.post_id, vote.voter_id)
            if existing is None:
                logfire.error(
                    "Stored vote missing after voter conflict",
                    post_id=str(vote.post_id),
                    voter_id=str(vote.voter_id),
                )
                raise StorageUnavailableError("vote_repository.save")
            return existing

    async def update(self, vote: Vote) -> Vote:
        """Overwrite a vote's category and move its count between columns."""
        with logfire.span(
            "vote_repository.update",
            vote_id=str(vote.id),
            vote_type=vote.vote_type.value,
        ):
            with storage_errors("vote_repository.update"):
                # Lock the row so concurrent overwrites adjust counters in turn
                stmt = (
                    select(votes_table.c.vote_type)
                    .where(votes_table.c.id == vote.id)
                    .with_for_update()
                )
                result = await self.session.execute(stmt)
                previous = VoteType(result.scalar_one())

                if previous == vote.vote_type:
                    return vote

                await self.session.execute(
                    update(votes_table)
                    .where(votes_table.c.id == vote.id)
                    .values(vote_type=vote.vote_type.value)
                )
                await self._bump_counters(
                    vote.post_id, {previous: -1, vote.vote_type: 1}
                )
                await self.session.flush()
                return vote

    async def count_by_post(self, post_id: PostId) -> List[VoteCount]:
        """Count votes on a post grouped by category."""
        with storage_errors("vote_repository.count_by_post"):
            stmt = (
                select(votes_table.c.vote_type, func.count().label("count"))
                .where(votes_table.c.post_id == post_id)
                .group_by(votes_table.c.vote_type)
            )
            result = await self.session.execute(stmt)
            return [
                VoteCount(
                    post_id=post_id,
                    vote_type=VoteType(row.vote_type),
                    count=row.count,
                )
                for row in result.fetchall()
            ]

    async def _bump_counters(
        self, post_id: PostId, deltas: dict[VoteType, int]
    ) -> None:
        """Apply per-category deltas to the post's leaderboard row.

        A single upsert statement, so concurrent writers never lose updates.
        """
        total_delta = sum(deltas.values())
        values = {"post_id": post_id, "total_votes": max(total_delta, 0)}
        values.update(
            {COUNT_COLUMNS[vote_type]: max(delta, 0) for vote_type, delta in deltas.items()}
        )

        increments = {
            COUNT_COLUMNS[vote_type]: leaderboard_table.c[COUNT_COLUMNS[vote_type]]
            + delta
            for vote_type, delta in deltas.items()
        }
        increments["total_votes"] = leaderboard_table.c.total_votes + total_delta

        stmt = (
            insert(leaderboard_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[leaderboard_table.c.post_id],
                set_=increments,
            )
        )
        await self.session.execute(stmt)
