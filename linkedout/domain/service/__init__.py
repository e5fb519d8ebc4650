"""Domain services."""

from .base import Service
from .post_service import PostService
from .vote_service import VoteService

__all__ = [
    "PostService",
    "Service",
    "VoteService",
]
