"""PostgreSQL implementation of the generic entity store.

One SQL skeleton serves every entity table: subclasses only declare their
table, column enum, mutable fields and row mapper.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Iterable, Optional

import logfire
from sqlalchemy import Table, false, func, insert, select, update
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from blog.domain.error import BackendUnavailableError, ConflictError
from blog.domain.repository.base import C, E, EntityRepository, K
from blog.domain.value import DEFAULT_PAGE_SIZE, Pagination
from blog.persistence.mappers import entity_to_dict


class PostgresEntityRepository(EntityRepository[E, K, C]):
    """SQLAlchemy Core implementation of EntityRepository.

    Every statement runs on the request's session; committing is left to
    the owner of the session.
    """

    table: ClassVar[Table]
    columns: ClassVar[type[Enum]]
    # Fields copied from the caller's entity on update
    mutable_fields: ClassVar[tuple[str, ...]]
    # Wrapped in staticmethod by subclasses
    row_mapper: Callable[[Dict[str, Any]], Any]

    def __init__(
        self, session: AsyncSession, default_page_size: int = DEFAULT_PAGE_SIZE
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
            default_page_size: Page size used when callers pass page_size <= 0
        """
        self.session = session
        self.default_page_size = default_page_size

    def _to_entity(self, row: Any) -> E:
        return self.row_mapper(row._asdict())

    def _to_dict(self, entity: E) -> Dict[str, Any]:
        return entity_to_dict(entity)

    def _live(self):
        return self.table.c.is_deleted == false()

    def _column(self, column: C):
        if not isinstance(column, self.columns):
            raise ValueError(
                f"Unsupported {self.resource} column: {column!r}; "
                f"expected one of {[c.value for c in self.columns]}"
            )
        return self.table.c[column.value]

    async def _execute(self, stmt: Executable):
        """Run a statement, translating driver failures into storage errors."""
        try:
            return await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn(
                "Constraint violated", resource=self.resource, error=str(e.orig)
            )
            raise ConflictError(self.resource, str(e.orig)) from e
        except (OperationalError, InterfaceError, OSError) as e:
            logfire.error(
                "Database unavailable", resource=self.resource, error=str(e)
            )
            raise BackendUnavailableError(str(e)) from e

    async def create(self, entity: E) -> E:
        """Insert a new row and return it with generated id and timestamps."""
        with logfire.span("{resource}_repository.create", resource=self.resource):
            now = datetime.now()
            values = self._to_dict(entity)
            values.update(
                created_at=now, updated_at=now, deleted_at=None, is_deleted=False
            )
            stmt = insert(self.table).values(**values).returning(self.table)
            result = await self._execute(stmt)
            created = self._to_entity(result.fetchone())
            logfire.info("{resource} created", resource=self.resource, id=created.id)
            return created

    async def get(self, entity_id: K, include_deleted: bool = False) -> Optional[E]:
        """Find an entity by ID."""
        with logfire.span(
            "{resource}_repository.get",
            resource=self.resource,
            id=entity_id,
            include_deleted=include_deleted,
        ):
            stmt = select(self.table).where(self.table.c.id == entity_id)
            if not include_deleted:
                stmt = stmt.where(self._live())
            result = await self._execute(stmt)
            row = result.fetchone()
            return self._to_entity(row) if row else None

    async def get_all(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        include_deleted: bool = False,
    ) -> list[E]:
        """List entities, newest first."""
        pagination = Pagination.of(page, page_size, self.default_page_size)
        with logfire.span(
            "{resource}_repository.get_all",
            resource=self.resource,
            page=pagination.page,
            page_size=pagination.page_size,
            include_deleted=include_deleted,
        ):
            stmt = select(self.table)
            if not include_deleted:
                stmt = stmt.where(self._live())
            stmt = (
                stmt.order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
                .limit(pagination.limit)
                .offset(pagination.offset)
            )
            result = await self._execute(stmt)
            return [self._to_entity(row) for row in result.fetchall()]

    async def update(self, entity_id: K, entity: E) -> Optional[E]:
        """Overwrite the mutable fields of a live entity."""
        with logfire.span(
            "{resource}_repository.update", resource=self.resource, id=entity_id
        ):
            data = self._to_dict(entity)
            values = {field: data[field] for field in self.mutable_fields}
            values["updated_at"] = datetime.now()
            stmt = (
                update(self.table)
                .where(self.table.c.id == entity_id, self._live())
                .values(**values)
                .returning(self.table)
            )
            result = await self._execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn(
                    "{resource} not found or deleted for update",
                    resource=self.resource,
                    id=entity_id,
                )
                return None

            return self._to_entity(row)

    async def delete(self, entity_id: K) -> bool:
        """Soft-delete a live entity."""
        with logfire.span(
            "{resource}_repository.delete", resource=self.resource, id=entity_id
        ):
            now = datetime.now()
            stmt = (
                update(self.table)
                .where(self.table.c.id == entity_id, self._live())
                .values(is_deleted=True, deleted_at=now, updated_at=now)
            )
            result = await self._execute(stmt)
            deleted = result.rowcount > 0
            logfire.info(
                "{resource} delete",
                resource=self.resource,
                id=entity_id,
                deleted=deleted,
            )
            return deleted

    async def find_by(
        self, value: Any, column: C, include_deleted: bool = False
    ) -> list[E]:
        """Find entities whose column equals the given value."""
        target = self._column(column)
        with logfire.span(
            "{resource}_repository.find_by",
            resource=self.resource,
            column=column.value,
            include_deleted=include_deleted,
        ):
            stmt = select(self.table).where(target == value)
            if not include_deleted:
                stmt = stmt.where(self._live())
            stmt = stmt.order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
            result = await self._execute(stmt)
            return [self._to_entity(row) for row in result.fetchall()]

    async def find_page_by(
        self,
        value: Any,
        column: C,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[E]:
        """List one page of live entities whose column equals the given value."""
        target = self._column(column)
        pagination = Pagination.of(page, page_size, self.default_page_size)
        with logfire.span(
            "{resource}_repository.find_page_by",
            resource=self.resource,
            column=column.value,
            page=pagination.page,
            page_size=pagination.page_size,
        ):
            stmt = (
                select(self.table)
                .where(target == value, self._live())
                .order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
                .limit(pagination.limit)
                .offset(pagination.offset)
            )
            result = await self._execute(stmt)
            return [self._to_entity(row) for row in result.fetchall()]

    async def get_many(self, entity_ids: Iterable[K]) -> list[E]:
        """Fetch several live entities by ID in a single query."""
        ids = sorted(set(entity_ids))
        if not ids:
            return []

        with logfire.span(
            "{resource}_repository.get_many", resource=self.resource, count=len(ids)
        ):
            stmt = select(self.table).where(self.table.c.id.in_(ids), self._live())
            result = await self._execute(stmt)
            return [self._to_entity(row) for row in result.fetchall()]

    async def find_in(self, column: C, values: Iterable[Any]) -> list[E]:
        """Find live entities whose column is any of the given values."""
        target = self._column(column)
        accepted = list(set(values))
        if not accepted:
            return []

        with logfire.span(
            "{resource}_repository.find_in",
            resource=self.resource,
            column=column.value,
            count=len(accepted),
        ):
            stmt = (
                select(self.table)
                .where(target.in_(accepted), self._live())
                .order_by(self.table.c.created_at, self.table.c.id)
            )
            result = await self._execute(stmt)
            return [self._to_entity(row) for row in result.fetchall()]

    async def count_by(self, value: Any, column: C) -> int:
        """Count live entities whose column equals the given value."""
        target = self._column(column)
        with logfire.span(
            "{resource}_repository.count_by",
            resource=self.resource,
            column=column.value,
        ):
            stmt = (
                select(func.count())
                .select_from(self.table)
                .where(target == value, self._live())
            )
            result = await self._execute(stmt)
            return result.scalar() or 0
