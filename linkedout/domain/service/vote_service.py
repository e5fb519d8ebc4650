"""Vote domain service."""

from uuid import uuid4

import logfire

from linkedout.domain.model.common import utcnow
from linkedout.domain.model.leaderboard import LeaderboardEntry
from linkedout.domain.model.post import Post
from linkedout.domain.model.vote import Vote
from linkedout.domain.repository import VoteRepository
from linkedout.domain.value import PostUrn, VoteId, VoterId, VoteType

from .base import Service
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def cast_vote(
        self,
        urn: PostUrn,
        content: str,
        voter_id: VoterId,
        vote_type: VoteType,
    ) -> LeaderboardEntry:
        """Record a voter's category for a post and return its new tally.

        Creates the post on first vote. A voter holds at most one vote per
        post: voting again overwrites the category, and repeating the same
        category changes nothing.

        Args:
            urn: Normalized post URN
            content: Post text, used only when the post is new
            voter_id: Voter identifier
            vote_type: Chosen category

        Returns:
            Zero-filled leaderboard entry for the post

        Raises:
            InvalidContentError: If the post is new and content is blank
            StorageUnavailableError: If the backing store fails
        """
        with logfire.span(
            "vote_service.cast_vote",
            urn=str(urn),
            voter_id=str(voter_id),
            vote_type=vote_type.value,
        ):
            post = await self.post_service.get_or_create_post(urn, content)

            existing = await self.vote_repository.find_by_post_and_voter(
                post.id, voter_id
            )
            if existing:
                await self._overwrite(existing, vote_type)
            else:
                vote = Vote(
                    id=VoteId(uuid4()),
                    post_id=post.id,
                    voter_id=voter_id,
                    vote_type=vote_type,
                    created_at=utcnow(),
                )
                saved = await self.vote_repository.save(vote)

                # Lost an insert race to the same voter; overwrite their row.
                if saved.id != vote.id:
                    logfire.info(
                        "Concurrent first vote detected",
                        post_id=str(post.id),
                        voter_id=str(voter_id),
                    )
                    await self._overwrite(saved, vote_type)
                else:
                    logfire.info(
                        "Vote cast",
                        post_id=str(post.id),
                        vote_type=vote_type.value,
                    )

            return await self.get_tally(post)

    async def get_tally(self, post: Post) -> LeaderboardEntry:
        """Aggregate the current votes on a post.

        Args:
            post: Post to aggregate

        Returns:
            Zero-filled leaderboard entry for the post
        """
        counts = await self.vote_repository.count_by_post(post.id)
        return LeaderboardEntry.from_counts(post, counts)

    async def _overwrite(self, vote: Vote, vote_type: VoteType) -> Vote:
        if vote.vote_type == vote_type:
            logfire.info(
                "Vote unchanged",
                post_id=str(vote.post_id),
                vote_type=vote_type.value,
            )
            return vote

        updated = await self.vote_repository.update(
            vote.model_copy(update={"vote_type": vote_type})
        )
        logfire.info(
            "Vote changed",
            post_id=str(vote.post_id),
            previous=vote.vote_type.value,
            vote_type=vote_type.value,
        )
        return updated
