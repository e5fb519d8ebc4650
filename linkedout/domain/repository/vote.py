"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkedout.domain.model.vote import Vote, VoteCount
from linkedout.domain.value import PostId, VoterId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Insert and overwrite are separate operations so the one-vote-per-voter
    rule stays visible at the interface instead of hiding behind an upsert.
    """

    @abstractmethod
    async def find_by_post_and_voter(
        self, post_id: PostId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific post.

        Args:
            post_id: ID of the post
            voter_id: The voter's identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        The (post_id, voter_id) pair is unique at the storage level. If a
        vote for the pair already exists, the stored vote is returned
        unchanged and the caller is expected to overwrite it with update().

        Args:
            vote: The vote to insert

        Returns:
            The persisted vote for this voter and post

        Raises:
            StorageUnavailableError: If the backing store fails
        """
        pass

    @abstractmethod
    async def update(self, vote: Vote) -> Vote:
        """Overwrite the category of an existing vote.

        The vote is identified by its own id. created_at is left untouched.

        Args:
            vote: The vote carrying the new vote_type

        Returns:
            The updated vote

        Raises:
            StorageUnavailableError: If the backing store fails
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> List[VoteCount]:
        """Count votes on a post grouped by category.

        Categories without votes are omitted; callers zero-fill.

        Args:
            post_id: ID of the post

        Returns:
            One VoteCount per category with at least one vote
        """
        pass
