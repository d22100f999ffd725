"""Argon2id implementation of the credential service."""

import logfire
from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from blog.config import CredentialSettings
from blog.domain.service.credential import CredentialService

from .error import CredentialError


class Argon2CredentialService(CredentialService):
    """Hashes passwords with Argon2id.

    The returned hash embeds the algorithm parameters and salt, so it is
    self-contained for verification even after the settings change.
    """

    def __init__(self, settings: CredentialSettings) -> None:
        """Initialize the hasher.

        Args:
            settings: Argon2 cost parameters
        """
        self._hasher = PasswordHasher(
            time_cost=settings.time_cost,
            memory_cost=settings.memory_cost,
            parallelism=settings.parallelism,
            hash_len=32,
            salt_len=16,
        )

    def hash(self, plaintext: str) -> str:
        """Hash a password.

        Raises:
            CredentialError: If the hashing backend fails
        """
        try:
            return self._hasher.hash(plaintext)
        except HashingError as e:
            logfire.error("Password hashing failed")
            raise CredentialError("Password hashing failed") from e

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash.

        Malformed hashes never match.
        """
        try:
            return self._hasher.verify(hashed, plaintext)
        except InvalidHashError:
            logfire.warn("Stored password hash is malformed")
            return False
        except VerificationError:
            return False
