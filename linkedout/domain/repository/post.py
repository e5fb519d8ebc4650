"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from linkedout.domain.model.post import Post
from linkedout.domain.value import PostId, PostUrn


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_urn(self, urn: PostUrn) -> Optional[Post]:
        """Find a post by its normalized URN.

        Args:
            urn: The post's external identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        The URN is unique at the storage level. If another writer stored a
        post with the same URN first, that stored post is returned instead
        and nothing is written.

        Args:
            post: The post to insert

        Returns:
            The persisted post for this URN

        Raises:
            StorageUnavailableError: If the backing store fails
        """
        pass
