"""Tag entity for categorizing posts."""

from typing import Optional

from pydantic import field_validator

from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import TagId
from blog.domain.value.types import normalize_tag_name


class Tag(SoftDeletableModel):
    """Tag entity.

    Names are stored normalized (trimmed, upper-cased) so uniqueness is
    case-insensitive.
    """

    id: Optional[TagId] = None
    name: str

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Normalize the tag name."""
        return normalize_tag_name(v)
