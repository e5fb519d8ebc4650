"""Vote use cases."""

from .submit_vote import SubmitVoteRequest, SubmitVoteUseCase

__all__ = [
    "SubmitVoteRequest",
    "SubmitVoteUseCase",
]
