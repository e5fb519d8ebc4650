"""Submit vote use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from linkedout.application.usecase.base import BaseUseCase
from linkedout.application.usecase.leaderboard.get_leaderboard import (
    LeaderboardEntryResponse,
)
from linkedout.domain.error import (
    InvalidCategoryError,
    InvalidItemReferenceError,
    InvalidVoterError,
)
from linkedout.domain.repository import UnitOfWork
from linkedout.domain.service import VoteService
from linkedout.domain.value import PostUrn, VoterId, VoteType


class SubmitVoteRequest(BaseModel):
    """Submit vote request.

    Fields are raw strings; they are validated by the use case so that each
    kind of bad input maps to its own domain error.
    """

    urn: str
    content: str
    vote_type: str
    voter_id: str


class SubmitVoteUseCase(BaseUseCase):
    """Use case for casting or changing a vote on a post."""

    def __init__(self, vote_service: VoteService, unit_of_work: UnitOfWork) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Commits the vote before the tally is returned
        """
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: SubmitVoteRequest) -> LeaderboardEntryResponse:
        """Execute submit vote flow.

        Inputs are checked in order (category, URN, voter) before anything
        is written.

        Args:
            request: Submit vote request

        Returns:
            Updated tally for the voted post

        Raises:
            InvalidCategoryError: If vote_type is not a known category
            InvalidItemReferenceError: If urn is malformed
            InvalidVoterError: If voter_id is blank
            InvalidContentError: If the post is new and content is blank
            StorageUnavailableError: If the vote cannot be stored or committed
        """
        with logfire.span("submit_vote.execute", vote_type=request.vote_type):
            if not VoteType.is_valid(request.vote_type):
                raise InvalidCategoryError(request.vote_type)
            vote_type = VoteType(request.vote_type)

            try:
                urn = PostUrn(request.urn)
            except PydanticValidationError as e:
                raise InvalidItemReferenceError(request.urn) from e

            try:
                voter_id = VoterId(request.voter_id)
            except PydanticValidationError as e:
                message = e.errors()[0]["msg"].removeprefix("Value error, ")
                raise InvalidVoterError(message) from e

            entry = await self.vote_service.cast_vote(
                urn=urn,
                content=request.content,
                voter_id=voter_id,
                vote_type=vote_type,
            )
            await self.unit_of_work.commit()

            return LeaderboardEntryResponse.from_entry(entry)
