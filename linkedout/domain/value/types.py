"""Domain value objects for LinkedOut.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from enum import Enum

from pydantic import field_validator

from linkedout.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Category a voter assigns to a post.

    The set is closed: seven labels, two positive and five negative.
    Declaration order is the canonical order of every ``votes`` mapping.
    """

    SOLID = "solid"
    INTERESTING = "interesting"
    SALESMAN = "salesman"
    BULLSHIT = "bullshit"
    SCAM = "scam"
    GURU = "guru"
    THEATER = "theater"

    @property
    def is_positive(self) -> bool:
        """Whether this category endorses the post."""
        return self in POSITIVE_VOTES

    @property
    def is_negative(self) -> bool:
        """Whether this category criticises the post."""
        return self in NEGATIVE_VOTES

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check membership of a raw string in the fixed set."""
        return value in cls._value2member_map_


POSITIVE_VOTES: frozenset[VoteType] = frozenset(
    {VoteType.SOLID, VoteType.INTERESTING}
)
NEGATIVE_VOTES: frozenset[VoteType] = frozenset(
    {
        VoteType.SALESMAN,
        VoteType.BULLSHIT,
        VoteType.SCAM,
        VoteType.GURU,
        VoteType.THEATER,
    }
)

_ACTIVITY_ID = re.compile(r"^[0-9]+$")
_LINKEDIN_URN = re.compile(r"^urn:li:(?:activity|share|ugcPost):([0-9]+)$")


class PostUrn(RootValueObject[str]):
    """Normalized LinkedIn post identifier.

    Stored as the bare numeric activity id. Full URNs such as
    ``urn:li:activity:7123456789`` are reduced to their numeric part.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_urn(cls, v: object) -> str:
        """Strip whitespace and reduce full URNs to the numeric id."""
        if not isinstance(v, str):
            raise ValueError("Post URN must be a string")
        value = v.strip()
        match = _LINKEDIN_URN.match(value)
        if match:
            value = match.group(1)
        if not _ACTIVITY_ID.match(value):
            raise ValueError(f"Invalid post URN: {v!r}")
        if len(value) > 64:
            raise ValueError("Post URN must be at most 64 characters")
        return value


class VoterId(RootValueObject[str]):
    """Anonymous voter identifier supplied by the client.

    Usually a hashed extension install id. No authentication is implied.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_voter_id(cls, v: object) -> str:
        """Trim and require a non-empty value."""
        if not isinstance(v, str):
            raise ValueError("Voter id must be a string")
        value = v.strip()
        if not value:
            raise ValueError("Voter id cannot be empty")
        if len(value) > 255:
            raise ValueError("Voter id must be at most 255 characters")
        return value
