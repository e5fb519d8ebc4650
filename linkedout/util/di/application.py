"""Application layer DI providers."""

from dishka import Scope, provide

from linkedout.application.usecase.leaderboard import GetLeaderboardUseCase
from linkedout.application.usecase.vote import SubmitVoteUseCase
from linkedout.domain.repository import LeaderboardRepository, UnitOfWork
from linkedout.domain.service import VoteService
from linkedout.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(
        self, vote_service: VoteService, unit_of_work: UnitOfWork
    ) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service, unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_get_leaderboard_use_case(
        self, leaderboard_repository: LeaderboardRepository
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(leaderboard_repository=leaderboard_repository)
