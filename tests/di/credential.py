"""Mock credential providers for testing."""

from dishka import Scope, provide

from blog.adapter.credential import Argon2CredentialService
from blog.config import CredentialSettings
from blog.domain.service import CredentialService
from blog.util.di.infrastructure.credential import CredentialProvider

# Smallest parameters argon2 accepts
CHEAP_CREDENTIAL_SETTINGS = CredentialSettings(
    time_cost=1, memory_cost=8, parallelism=1
)


class MockCredentialProvider(CredentialProvider):
    """Mock credential provider hashing with minimal Argon2 cost."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_credential_service(self) -> CredentialService:
        """Provide a fast Argon2 credential service."""
        return Argon2CredentialService(CHEAP_CREDENTIAL_SETTINGS)
