"""User aggregate root."""

from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.common import SoftDeletableModel
from blog.domain.value import UserId
from blog.domain.value.types import check_email


class User(SoftDeletableModel):
    """User aggregate root.

    ``password`` holds the credential hash produced by the credential
    service. It is only populated on values read straight from the store;
    services clear it before handing users to callers.
    """

    id: Optional[UserId] = None
    username: str = Field(min_length=4, max_length=12)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: str = Field(max_length=255)
    password: Optional[str] = Field(default=None, repr=False)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the email format."""
        return check_email(v)

    def without_password(self) -> "User":
        """Return a copy safe to expose to callers."""
        return self.model_copy(update={"password": None})
