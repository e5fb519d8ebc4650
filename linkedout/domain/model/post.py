"""Post entity.

A post is the votable content unit, identified externally by its LinkedIn
URN. Posts are created on the first vote they receive and never change.
"""

from datetime import datetime

from pydantic import Field, field_validator

from linkedout.domain.model.common import DomainModel, utcnow
from linkedout.domain.value import PostId, PostUrn


class Post(DomainModel):
    """Post entity.

    Business rules:
    - One post per URN (enforced by database unique constraint)
    - Content is trimmed and must not be empty
    - Immutable once created
    """

    id: PostId
    urn: PostUrn
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        """Trim surrounding whitespace before length validation."""
        return v.strip() if isinstance(v, str) else v
