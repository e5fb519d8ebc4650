"""Strongly typed identifiers for LinkedOut domain entities.

NewType keeps post and vote ids apart at type-check time even though both
are plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
VoteId = NewType("VoteId", UUID)
