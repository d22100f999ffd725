"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a write references a resource that is missing or deleted."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageError(DomainError):
    """Base error for failures reported by a repository."""

    pass


class ConflictError(StorageError):
    """A write violated a uniqueness or integrity constraint."""

    def __init__(self, resource: str, detail: str):
        self.resource = resource
        self.detail = detail
        super().__init__(f"{resource} conflict: {detail}")


class MultipleMatchesError(StorageError):
    """More than one row matched a lookup that expects at most one.

    Signals a data integrity problem, never a user error.
    """

    def __init__(self, resource: str, column: str, value: object):
        self.resource = resource
        self.column = column
        self.value = value
        super().__init__(f"Multiple {resource} rows found for {column} = {value!r}")


class BackendUnavailableError(StorageError):
    """The relational backend could not be reached or failed mid-statement."""

    pass


class AuthenticationError(DomainError):
    """Username and password do not match a live account."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")
