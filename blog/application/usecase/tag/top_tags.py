"""Top tags use case."""

from pydantic import BaseModel, Field

from blog.domain.model import Tag
from blog.domain.service import TagService


class TopTagsRequest(BaseModel):
    """Top tags request."""

    limit: int = Field(default=10, ge=1, le=100)


class TopTagsResponse(BaseModel):
    """Top tags response."""

    tags: list[Tag]


class TopTagsUseCase:
    """Use case for the most used tags."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: TopTagsRequest) -> TopTagsResponse:
        """Execute top tags flow."""
        return TopTagsResponse(tags=await self.tag_service.top_tags(request.limit))
