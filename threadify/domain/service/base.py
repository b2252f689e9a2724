"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span an aggregate and its
    repository: existence checks, ownership checks and atomic updates.
    """

    pass
