"""Domain layer errors.

Each error maps to exactly one HTTP status at the interface boundary.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class BadRequestError(DomainError):
    """Raised when input is malformed or violates a business rule."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not match a user.

    Unknown email and wrong password raise the same error with the same
    message so callers cannot enumerate accounts.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidTokenError(DomainError):
    """Raised when a bearer token does not resolve to a user."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
