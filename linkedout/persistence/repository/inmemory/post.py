"""In-memory post repository for testing and single-process deployments."""

from typing import Optional

from linkedout.domain.model.post import Post
from linkedout.domain.repository.post import PostRepository
from linkedout.domain.value import PostId, PostUrn


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._by_urn: dict[PostUrn, PostId] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_urn(self, urn: PostUrn) -> Optional[Post]:
        """Find a post by URN."""
        post_id = self._by_urn.get(urn)
        return self._posts[post_id] if post_id else None

    async def save(self, post: Post) -> Post:
        """Insert a post, returning the stored one if the URN is taken."""
        existing_id = self._by_urn.get(post.urn)
        if existing_id:
            return self._posts[existing_id]

        self._posts[post.id] = post
        self._by_urn[post.urn] = post.id
        return post

    def list_posts(self) -> list[Post]:
        """All stored posts, in insertion order."""
        return list(self._posts.values())
