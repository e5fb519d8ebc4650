"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input rejected before any write. Callers can fix the input and retry."""

    pass


class InvalidCategoryError(ValidationError):
    """Raised when a vote type is not one of the seven categories."""

    def __init__(self, vote_type: str):
        self.vote_type = vote_type
        super().__init__(f"Invalid vote type: {vote_type}")


class InvalidItemReferenceError(ValidationError):
    """Raised when a post URN is malformed."""

    def __init__(self, urn: str):
        self.urn = urn
        super().__init__(f"Invalid post URN: {urn!r}")


class InvalidContentError(ValidationError):
    """Raised when a new post would be created with empty content."""

    def __init__(self, urn: str):
        self.urn = urn
        super().__init__(f"Post content cannot be empty (urn {urn})")


class InvalidVoterError(ValidationError):
    """Raised when the voter id is empty after trimming."""

    def __init__(self, message: str = "Voter id cannot be empty"):
        super().__init__(message)


class StorageUnavailableError(DomainError):
    """Raised when the backing store fails. Never retried by the core."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage unavailable during {operation}")
