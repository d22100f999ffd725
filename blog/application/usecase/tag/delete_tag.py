"""Delete tag use case."""

from pydantic import BaseModel

from blog.domain.service import TagService
from blog.domain.value import TagId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: TagId


class DeleteTagResponse(BaseModel):
    """Delete tag response."""

    deleted: bool


class DeleteTagUseCase:
    """Use case for soft-deleting a tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> DeleteTagResponse:
        """Execute delete tag flow."""
        deleted = await self.tag_service.delete_tag(request.tag_id)
        return DeleteTagResponse(deleted=deleted)
