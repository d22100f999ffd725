"""Credential service interface.

Password hashing is owned by an adapter; the domain only knows how to ask
for a hash and how to check a candidate against one.
"""

from abc import ABC, abstractmethod


class CredentialService(ABC):
    """Hashes and verifies passwords.

    Implementations must never store or log the plaintext.
    """

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Hash a password.

        Args:
            plaintext: Password as typed by the user

        Returns:
            Opaque hash string, safe to persist
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a stored hash.

        Args:
            plaintext: Candidate password
            hashed: Hash previously returned by ``hash``

        Returns:
            True if the password matches
        """
        pass
