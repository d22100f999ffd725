"""Credential infrastructure providers."""

from dishka import Scope, provide

from blog.adapter.credential import Argon2CredentialService
from blog.config import CredentialSettings
from blog.domain.service import CredentialService
from blog.util.di.base import ProviderBase


class CredentialProvider(ProviderBase):
    """Credential component base."""

    __mock_component__ = "credential"


class ProdCredentialProvider(CredentialProvider):
    """Production credential provider using Argon2id."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_credential_service(
        self, credential_settings: CredentialSettings
    ) -> CredentialService:
        """Provide password hashing service."""
        return Argon2CredentialService(credential_settings)
