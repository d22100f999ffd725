"""List tags use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import PageRequest
from blog.domain.model import Tag
from blog.domain.service import TagService


class ListTagsRequest(PageRequest):
    """List tags request."""

    pass


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[Tag]


class ListTagsUseCase:
    """Use case for listing available tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            One page of live tags, newest first
        """
        with logfire.span(
            "list_tags.execute", page=request.page, page_size=request.page_size
        ):
            tags = await self.tag_service.list_tags(request.page, request.page_size)
            return ListTagsResponse(tags=tags)
