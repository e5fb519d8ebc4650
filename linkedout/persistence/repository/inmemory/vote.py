"""In-memory vote repository for testing and single-process deployments."""

from collections import Counter
from typing import Optional

from linkedout.domain.error import StorageUnavailableError
from linkedout.domain.model.vote import Vote, VoteCount
from linkedout.domain.repository.vote import VoteRepository
from linkedout.domain.value import PostId, VoteId, VoterId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository.

    Votes are grouped by post and keyed by voter within a post, so the
    one-vote-per-voter rule holds by construction and counting a post only
    touches that post's votes.
    """

    def __init__(self) -> None:
        self._by_post: dict[PostId, dict[VoterId, Vote]] = {}
        self._keys: dict[VoteId, tuple[PostId, VoterId]] = {}

    async def find_by_post_and_voter(
        self, post_id: PostId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find a voter's vote on a post."""
        return self._by_post.get(post_id, {}).get(voter_id)

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote, returning the stored one if the voter already voted."""
        post_votes = self._by_post.setdefault(vote.post_id, {})
        existing = post_votes.get(vote.voter_id)
        if existing:
            return existing

        post_votes[vote.voter_id] = vote
        self._keys[vote.id] = (vote.post_id, vote.voter_id)
        return vote

    async def update(self, vote: Vote) -> Vote:
        """Overwrite the category of the vote with the same id."""
        key = self._keys.get(vote.id)
        if key is None:
            raise StorageUnavailableError("vote_repository.update")

        post_id, voter_id = key
        stored = self._by_post[post_id][voter_id]
        updated = stored.model_copy(update={"vote_type": vote.vote_type})
        self._by_post[post_id][voter_id] = updated
        return updated

    async def count_by_post(self, post_id: PostId) -> list[VoteCount]:
        """Count votes on a post grouped by category."""
        counts = Counter(
            vote.vote_type for vote in self._by_post.get(post_id, {}).values()
        )
        return [
            VoteCount(post_id=post_id, vote_type=vote_type, count=counts[vote_type])
            for vote_type in VoteType
            if counts[vote_type]
        ]

    def list_votes(self) -> list[Vote]:
        """All stored votes, grouped by post in insertion order."""
        return [
            vote for post_votes in self._by_post.values() for vote in post_votes.values()
        ]
