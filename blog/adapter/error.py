"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class CredentialError(AdapterError):
    """Password hashing backend failure."""

    pass
