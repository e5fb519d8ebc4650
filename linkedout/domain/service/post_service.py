"""Post domain service."""

from uuid import uuid4

import logfire

from linkedout.domain.error import InvalidContentError
from linkedout.domain.model.common import utcnow
from linkedout.domain.model.post import Post
from linkedout.domain.repository import PostRepository
from linkedout.domain.value import PostId, PostUrn

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_or_create_post(self, urn: PostUrn, content: str) -> Post:
        """Return the post for a URN, creating it on first sight.

        Content is only read when the post does not exist yet; later votes
        never change it.

        Args:
            urn: Normalized post URN
            content: Post text captured by the client

        Returns:
            The single persisted post for this URN

        Raises:
            InvalidContentError: If the post is new and content is blank
        """
        with logfire.span("post_service.get_or_create_post", urn=str(urn)):
            existing = await self.post_repository.find_by_urn(urn)
            if existing:
                return existing

            text = content.strip()
            if not text:
                logfire.warn("Rejected post with empty content", urn=str(urn))
                raise InvalidContentError(str(urn))

            post = Post(
                id=PostId(uuid4()),
                urn=urn,
                content=text,
                created_at=utcnow(),
            )
            saved = await self.post_repository.save(post)

            if saved.id == post.id:
                logfire.info("Post created", post_id=str(saved.id), urn=str(urn))
            else:
                logfire.info(
                    "Post created concurrently, using stored row",
                    post_id=str(saved.id),
                    urn=str(urn),
                )

            return saved
