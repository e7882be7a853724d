"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans aggregates or talks to
    collaborators (token signing, identity providers) on their behalf.
    """

    pass
