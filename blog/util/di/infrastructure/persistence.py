"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.config import Settings
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    PostTagRepository,
    ReviewRepository,
    TagRepository,
    UserRepository,
)
from blog.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from blog.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresPostTagRepository,
    PostgresReviewRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        All repositories of a request share this session, so the writes of
        one operation are committed together when the request ends, or
        rolled back together if it raised.
        """
        async with get_session(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(
        self, session: AsyncSession, settings: Settings
    ) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(
            session, default_page_size=settings.pagination.default_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self, session: AsyncSession, settings: Settings
    ) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(
            session, default_page_size=settings.pagination.default_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, settings: Settings
    ) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(
            session, default_page_size=settings.pagination.default_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_review_repository(
        self, session: AsyncSession, settings: Settings
    ) -> ReviewRepository:
        """Provide Review repository."""
        return PostgresReviewRepository(
            session, default_page_size=settings.pagination.default_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(
        self, session: AsyncSession, settings: Settings
    ) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(
            session, default_page_size=settings.pagination.default_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_post_tag_repository(self, session: AsyncSession) -> PostTagRepository:
        """Provide PostTag repository."""
        return PostgresPostTagRepository(session)
