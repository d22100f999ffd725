"""Base models for all domain entities."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class SoftDeletableModel(DomainModel):
    """Domain model carrying the soft-delete envelope.

    Rows are never physically removed: deleting sets ``is_deleted`` and
    ``deleted_at``, and default reads skip such rows.
    """

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
    is_deleted: bool = False
