"""Get tag use case."""

from pydantic import BaseModel

from blog.domain.model import Tag
from blog.domain.service import TagService
from blog.domain.value import TagId


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: TagId


class GetTagResponse(BaseModel):
    """Get tag response; ``tag`` is None when not found."""

    tag: Tag | None


class GetTagUseCase:
    """Use case for reading one tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        """Execute get tag flow."""
        return GetTagResponse(tag=await self.tag_service.get_tag(request.tag_id))
