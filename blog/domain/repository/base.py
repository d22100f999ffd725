"""Generic soft-delete entity store interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, Iterable, Optional, TypeVar

import logfire

from blog.domain.error import MultipleMatchesError
from blog.domain.model.common import SoftDeletableModel

E = TypeVar("E", bound=SoftDeletableModel)
K = TypeVar("K", bound=int)
C = TypeVar("C", bound=Enum)


class EntityRepository(ABC, Generic[E, K, C]):
    """Soft-delete CRUD contract shared by every entity store.

    Type parameters:
        E: The entity model
        K: The entity identifier
        C: The closed enumeration of columns callers may filter on

    Default reads never return soft-deleted rows; pass ``include_deleted``
    to reach them for audit or recovery paths.
    """

    # Name used in errors and log records
    resource: ClassVar[str] = "entity"

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Insert a new row.

        Args:
            entity: Entity to insert (its id and timestamps are ignored)

        Returns:
            The stored entity with generated id and timestamps

        Raises:
            ConflictError: If a unique constraint is violated
        """
        pass

    @abstractmethod
    async def get(self, entity_id: K, include_deleted: bool = False) -> Optional[E]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's identifier
            include_deleted: Whether a soft-deleted row may be returned

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(
        self, page: int = 1, page_size: int = 100, include_deleted: bool = False
    ) -> list[E]:
        """List entities, newest first.

        Args:
            page: 1-based page number (values <= 0 mean 1)
            page_size: Rows per page (values <= 0 mean the default size)
            include_deleted: Whether to include soft-deleted rows

        Returns:
            The requested page, empty when past the end
        """
        pass

    @abstractmethod
    async def update(self, entity_id: K, entity: E) -> Optional[E]:
        """Overwrite the mutable fields of a live entity.

        Args:
            entity_id: ID of the entity to update
            entity: Entity carrying the new field values

        Returns:
            The updated entity, or None if missing or soft-deleted
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: K) -> bool:
        """Soft-delete an entity.

        Args:
            entity_id: ID of the entity to delete

        Returns:
            True if a live row was deleted, False if missing or already deleted
        """
        pass

    @abstractmethod
    async def find_by(
        self, value: Any, column: C, include_deleted: bool = False
    ) -> list[E]:
        """Find entities whose column equals the given value.

        Args:
            value: Value to match
            column: Column to filter on (must belong to this store's column enum)
            include_deleted: Whether to include soft-deleted rows

        Returns:
            Matching entities, newest first

        Raises:
            ValueError: If the column is not part of this store's column enum
        """
        pass

    @abstractmethod
    async def find_page_by(
        self, value: Any, column: C, page: int = 1, page_size: int = 100
    ) -> list[E]:
        """List one page of the live entities whose column equals a value.

        Same ordering and page coercion as ``get_all``.

        Args:
            value: Value to match
            column: Column to filter on (must belong to this store's column enum)
            page: 1-based page number (values <= 0 mean 1)
            page_size: Rows per page (values <= 0 mean the default size)

        Returns:
            The requested page, empty when past the end

        Raises:
            ValueError: If the column is not part of this store's column enum
        """
        pass

    async def find_one_by(
        self, value: Any, column: C, include_deleted: bool = False
    ) -> Optional[E]:
        """Find the single entity whose column equals the given value.

        Returns:
            The entity if exactly one matches, None if none does

        Raises:
            MultipleMatchesError: If more than one row matches
        """
        matches = await self.find_by(value, column, include_deleted)
        if len(matches) > 1:
            logfire.error(
                "Multiple rows matched a single-row lookup",
                resource=self.resource,
                column=column.value,
                matches=len(matches),
            )
            raise MultipleMatchesError(self.resource, column.value, value)
        return matches[0] if matches else None

    @abstractmethod
    async def get_many(self, entity_ids: Iterable[K]) -> list[E]:
        """Fetch several live entities by ID in a single round trip.

        Args:
            entity_ids: IDs to fetch (unknown or deleted ids are skipped)

        Returns:
            The live entities found, in no particular order
        """
        pass

    @abstractmethod
    async def find_in(self, column: C, values: Iterable[Any]) -> list[E]:
        """Find live entities whose column is any of the given values.

        Args:
            column: Column to filter on
            values: Accepted values

        Returns:
            Matching entities, oldest first
        """
        pass

    @abstractmethod
    async def count_by(self, value: Any, column: C) -> int:
        """Count live entities whose column equals the given value."""
        pass
