"""Unit tests for Argon2CredentialService."""

import pytest

from blog.adapter.credential import Argon2CredentialService
from blog.config import CredentialSettings


@pytest.fixture
def credential_service() -> Argon2CredentialService:
    return Argon2CredentialService(
        CredentialSettings(time_cost=1, memory_cost=8, parallelism=1)
    )


class TestArgon2CredentialService:
    """Tests for hashing and verification."""

    def test_hash_is_salted_argon2id(self, credential_service):
        first = credential_service.hash("s3cret")
        second = credential_service.hash("s3cret")

        assert first.startswith("$argon2id$")
        assert "s3cret" not in first
        assert first != second

    def test_verify_matching_password(self, credential_service):
        hashed = credential_service.hash("s3cret")

        assert credential_service.verify("s3cret", hashed) is True

    def test_verify_wrong_password(self, credential_service):
        hashed = credential_service.hash("s3cret")

        assert credential_service.verify("guess", hashed) is False

    def test_malformed_hash_never_matches(self, credential_service):
        assert credential_service.verify("s3cret", "not-a-hash") is False
