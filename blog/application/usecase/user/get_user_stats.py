"""Get user stats use case."""

from pydantic import BaseModel

from blog.domain.model import UserStats
from blog.domain.service import UserService
from blog.domain.value import UserId


class GetUserStatsRequest(BaseModel):
    """Get user stats request."""

    user_id: UserId


class GetUserStatsResponse(BaseModel):
    """Get user stats response; ``stats`` is None for an unknown user."""

    stats: UserStats | None


class GetUserStatsUseCase:
    """Use case for a profile's activity counters."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserStatsRequest) -> GetUserStatsResponse:
        """Execute get user stats flow."""
        stats = await self.user_service.get_user_stats(request.user_id)
        return GetUserStatsResponse(stats=stats)
