"""Vote and leaderboard routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from linkedout.application.usecase.leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
    LeaderboardEntryResponse,
)
from linkedout.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from linkedout.config import LeaderboardSettings
from linkedout.domain.error import StorageUnavailableError, ValidationError

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class SubmitVoteAPIRequest(BaseModel):
    """API request for submitting a vote (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    urn: str
    content: str
    vote_type: str
    voter_id: str


@router.post(
    "",
    response_model=LeaderboardEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_vote(
    request: SubmitVoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
) -> LeaderboardEntryResponse:
    """Cast or change a vote on a post.

    Creates the post on its first vote. Voting again with another category
    replaces the previous vote.

    Args:
        request: Vote data
        submit_vote_use_case: Submit vote use case from DI

    Returns:
        Updated tally for the post

    Raises:
        HTTPException: 400 on invalid input, 503 if storage is unavailable
    """
    try:
        return await submit_vote_use_case.execute(
            SubmitVoteRequest(
                urn=request.urn,
                content=request.content,
                vote_type=request.vote_type,
                voter_id=request.voter_id,
            )
        )
    except ValidationError as e:
        logfire.warn("Vote rejected", error=str(e), error_type=type(e).__name__)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageUnavailableError as e:
        logfire.error("Vote not stored", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storage unavailable",
        )


@router.get("/leaderboard", response_model=list[LeaderboardEntryResponse])
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    leaderboard_settings: FromDishka[LeaderboardSettings],
    vote_type: str | None = Query(default=None, alias="type"),
    limit: int | None = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> list[LeaderboardEntryResponse]:
    """Get a ranked page of the leaderboard.

    Args:
        get_leaderboard_use_case: Get leaderboard use case from DI
        leaderboard_settings: Paging defaults from DI
        vote_type: Category to filter and rank by (total votes when omitted)
        limit: Page size (configured default when omitted)
        offset: Number of ranked entries to skip

    Returns:
        Ranked leaderboard entries

    Raises:
        HTTPException: 400 on unknown category, 503 if storage is unavailable
    """
    page_size = min(
        limit or leaderboard_settings.default_limit,
        leaderboard_settings.max_limit,
    )

    try:
        return await get_leaderboard_use_case.execute(
            GetLeaderboardRequest(vote_type=vote_type, limit=page_size, offset=offset)
        )
    except ValidationError as e:
        logfire.warn("Leaderboard query rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StorageUnavailableError as e:
        logfire.error("Leaderboard not available", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storage unavailable",
        )
