"""Request types shared by use cases."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints

from blog.domain.value import UserId
from blog.domain.value.types import normalize_tag_name

# Required text field: surrounding whitespace is dropped, then it must be non-empty
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _normalize_tag_names(names: list[str]) -> list[str]:
    return [normalize_tag_name(name) for name in names]


# Tag names checked and normalized up front
TagNames = Annotated[list[str], AfterValidator(_normalize_tag_names)]


class AuthSession(BaseModel):
    """Who is acting, as established by a successful login.

    Passed explicitly by callers instead of living in a process-wide
    "current user".
    """

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    username: str


class PageRequest(BaseModel):
    """Raw page window; out of range values are coerced by the stores."""

    page: int = 1
    page_size: int = 0
