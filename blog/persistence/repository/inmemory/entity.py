"""In-memory implementation of the generic entity store for testing."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional

from blog.domain.error import ConflictError
from blog.domain.repository.base import C, E, EntityRepository, K
from blog.domain.value import DEFAULT_PAGE_SIZE, Pagination


class InMemoryEntityRepository(EntityRepository[E, K, C]):
    """In-memory implementation of EntityRepository for testing.

    Behaves like the SQL store: ids come from a counter, rows are only
    soft-deleted and unique fields are checked against every row,
    deleted ones included.
    """

    columns: ClassVar[type[Enum]]
    mutable_fields: ClassVar[tuple[str, ...]]
    unique_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, default_page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize empty repository."""
        self._rows: dict[int, E] = {}
        self._next_id = 1
        self.default_page_size = default_page_size

    @staticmethod
    def _newest_first(entity: E) -> tuple:
        return (entity.created_at, entity.id)

    def _column(self, column: C) -> str:
        if not isinstance(column, self.columns):
            raise ValueError(
                f"Unsupported {self.resource} column: {column!r}; "
                f"expected one of {[c.value for c in self.columns]}"
            )
        return column.value

    def _check_unique(self, entity: E, exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            value = getattr(entity, field)
            for row_id, row in self._rows.items():
                if row_id != exclude_id and getattr(row, field) == value:
                    raise ConflictError(self.resource, f"{field} already exists")

    def _rows_where(self, include_deleted: bool = False) -> list[E]:
        return [
            row for row in self._rows.values() if include_deleted or not row.is_deleted
        ]

    async def create(self, entity: E) -> E:
        """Insert a new row."""
        self._check_unique(entity)
        now = datetime.now()
        created = entity.model_copy(
            update={
                "id": self._next_id,
                "created_at": now,
                "updated_at": now,
                "deleted_at": None,
                "is_deleted": False,
            }
        )
        self._rows[self._next_id] = created
        self._next_id += 1
        return created

    async def get(self, entity_id: K, include_deleted: bool = False) -> Optional[E]:
        """Find an entity by ID."""
        row = self._rows.get(entity_id)
        if row is None or (row.is_deleted and not include_deleted):
            return None
        return row

    async def get_all(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        include_deleted: bool = False,
    ) -> list[E]:
        """List entities, newest first."""
        pagination = Pagination.of(page, page_size, self.default_page_size)
        rows = sorted(
            self._rows_where(include_deleted), key=self._newest_first, reverse=True
        )
        return rows[pagination.offset : pagination.offset + pagination.limit]

    async def update(self, entity_id: K, entity: E) -> Optional[E]:
        """Overwrite the mutable fields of a live entity."""
        row = await self.get(entity_id)
        if row is None:
            return None

        changes = {field: getattr(entity, field) for field in self.mutable_fields}
        self._check_unique(entity, exclude_id=entity_id)
        changes["updated_at"] = datetime.now()
        updated = row.model_copy(update=changes)
        self._rows[entity_id] = updated
        return updated

    async def delete(self, entity_id: K) -> bool:
        """Soft-delete a live entity."""
        row = await self.get(entity_id)
        if row is None:
            return False

        now = datetime.now()
        self._rows[entity_id] = row.model_copy(
            update={"is_deleted": True, "deleted_at": now, "updated_at": now}
        )
        return True

    async def find_by(
        self, value: Any, column: C, include_deleted: bool = False
    ) -> list[E]:
        """Find entities whose column equals the given value."""
        field = self._column(column)
        rows = [
            row
            for row in self._rows_where(include_deleted)
            if getattr(row, field) == value
        ]
        return sorted(rows, key=self._newest_first, reverse=True)

    async def find_page_by(
        self,
        value: Any,
        column: C,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[E]:
        """List one page of live entities whose column equals the given value."""
        pagination = Pagination.of(page, page_size, self.default_page_size)
        rows = await self.find_by(value, column)
        return rows[pagination.offset : pagination.offset + pagination.limit]

    async def get_many(self, entity_ids: Iterable[K]) -> list[E]:
        """Fetch several live entities by ID."""
        rows = (self._rows.get(entity_id) for entity_id in set(entity_ids))
        return [row for row in rows if row is not None and not row.is_deleted]

    async def find_in(self, column: C, values: Iterable[Any]) -> list[E]:
        """Find live entities whose column is any of the given values."""
        field = self._column(column)
        accepted = set(values)
        rows = [row for row in self._rows_where() if getattr(row, field) in accepted]
        return sorted(rows, key=self._newest_first)

    async def count_by(self, value: Any, column: C) -> int:
        """Count live entities whose column equals the given value."""
        return len(await self.find_by(value, column))
