"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation and normalization rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject, ValueObject

DEFAULT_PAGE_SIZE = 100

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def normalize_tag_name(value: str) -> str:
    """Strip and upper-case a raw tag name.

    Raises:
        ValueError: If the normalized name is empty or longer than 50 characters
    """
    if not isinstance(value, str):
        raise ValueError("Tag name must be a string")
    value = value.strip().upper()
    if len(value) < 1 or len(value) > 50:
        raise ValueError("Tag name must be 1-50 characters")
    return value


def check_email(value: str) -> str:
    """Validate an email address shape.

    Raises:
        ValueError: If the address is malformed
    """
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please enter a valid email address")
    return value


class Rate(str, Enum):
    """Rating category a reader can give to a post."""

    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"


class TagName(RootValueObject[str]):
    """Tag name, normalized for case-insensitive uniqueness.

    Surrounding whitespace is stripped and the name is upper-cased,
    so 'Rust', ' rust ' and 'RUST' are the same tag.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Normalize the tag name."""
        return normalize_tag_name(v)


class Pagination(ValueObject):
    """1-based page window over a listing.

    Use ``Pagination.of`` to build one from raw caller input: page <= 0
    becomes 1 and page_size <= 0 becomes the default page size.
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def of(
        cls, page: int, page_size: int, default_page_size: int = DEFAULT_PAGE_SIZE
    ) -> "Pagination":
        """Coerce raw page parameters into a valid window."""
        return cls(
            page=page if page > 0 else 1,
            page_size=page_size if page_size > 0 else default_page_size,
        )

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
