"""PostgreSQL implementation of Leaderboard repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from linkedout.domain.model import LeaderboardEntry
from linkedout.domain.repository import LeaderboardRepository
from linkedout.domain.value import VoteType
from linkedout.persistence.database import storage_errors
from linkedout.persistence.mappers import row_to_leaderboard_entry
from linkedout.persistence.tables import COUNT_COLUMNS, leaderboard_table, posts_table


class PostgresLeaderboardRepository(LeaderboardRepository):
    """Reads the leaderboard counter table maintained by vote writes."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(
        self,
        vote_type: Optional[VoteType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[LeaderboardEntry]:
        """Find ranked leaderboard entries."""
        with logfire.span(
            "leaderboard_repository.find_all",
            vote_type=vote_type.value if vote_type else None,
            limit=limit,
            offset=offset,
        ):
            rank_column = (
                leaderboard_table.c[COUNT_COLUMNS[vote_type]]
                if vote_type
                else leaderboard_table.c.total_votes
            )

            stmt = (
                select(
                    posts_table.c.id,
                    posts_table.c.urn,
                    posts_table.c.content,
                    posts_table.c.created_at,
                    *[leaderboard_table.c[name] for name in COUNT_COLUMNS.values()],
                )
                .select_from(
                    leaderboard_table.join(
                        posts_table, leaderboard_table.c.post_id == posts_table.c.id
                    )
                )
                .where(rank_column > 0)
                .order_by(
                    desc(rank_column),
                    desc(posts_table.c.created_at),
                    desc(posts_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )

            with storage_errors("leaderboard_repository.find_all"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            return [row_to_leaderboard_entry(row._asdict()) for row in rows]
