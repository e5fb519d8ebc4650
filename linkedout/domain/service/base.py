"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several repositories, such as
    creating a post on its first vote.
    """

    pass
