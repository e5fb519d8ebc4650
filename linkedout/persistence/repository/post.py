"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from linkedout.domain.error import StorageUnavailableError
from linkedout.domain.model import Post
from linkedout.domain.repository import PostRepository
from linkedout.domain.value import PostId, PostUrn
from linkedout.persistence.database import storage_errors
from linkedout.persistence.mappers import post_to_dict, row_to_post
from linkedout.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with storage_errors("post_repository.find_by_id"):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_urn(self, urn: PostUrn) -> Optional[Post]:
        """Find a post by URN."""
        with storage_errors("post_repository.find_by_urn"):
            stmt = select(posts_table).where(posts_table.c.urn == urn.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Insert a post, yielding to an existing row with the same URN.

        ON CONFLICT DO NOTHING keeps the transaction usable when a concurrent
        request created the post first; the winner's row is read back.
        """
        with logfire.span("post_repository.save", urn=str(post.urn)):
            with storage_errors("post_repository.save"):
                stmt = (
                    insert(posts_table)
                    .values(**post_to_dict(post))
                    .on_conflict_do_nothing(index_elements=[posts_table.c.urn])
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            if row:
                return row_to_post(row._asdict())

            logfire.info("Post URN conflict, reading stored row", urn=str(post.urn))
            existing = await self.find_by_urn(post.urn)
            if existing is None:
                logfire.error(
                    "Stored post missing after URN conflict", urn=str(post.urn)
                )
                raise StorageUnavailableError("post_repository.save")
            return existing
