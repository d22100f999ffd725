"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import Settings
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    PostTagRepository,
    ReviewRepository,
    TagRepository,
    UserRepository,
)
from blog.domain.service import (
    CommentService,
    CredentialService,
    PostAggregationService,
    PostService,
    ReviewService,
    TagService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each unit of work gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        review_repository: ReviewRepository,
        credential_service: CredentialService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            review_repository=review_repository,
            credential_service=credential_service,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_tag_service(
        self,
        tag_repository: TagRepository,
        post_tag_repository: PostTagRepository,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository, post_tag_repository=post_tag_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, post_repository: PostRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, post_repository=post_repository
        )

    @provide
    def get_review_service(
        self, review_repository: ReviewRepository, post_repository: PostRepository
    ) -> ReviewService:
        """Provide review domain service."""
        return ReviewService(
            review_repository=review_repository, post_repository=post_repository
        )

    @provide
    def get_aggregation_service(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        tag_repository: TagRepository,
        post_tag_repository: PostTagRepository,
        comment_repository: CommentRepository,
        review_repository: ReviewRepository,
        tag_service: TagService,
        settings: Settings,
    ) -> PostAggregationService:
        """Provide post aggregation service."""
        return PostAggregationService(
            post_repository=post_repository,
            user_repository=user_repository,
            tag_repository=tag_repository,
            post_tag_repository=post_tag_repository,
            comment_repository=comment_repository,
            review_repository=review_repository,
            tag_service=tag_service,
            max_comment_depth=settings.comments.max_depth,
            default_page_size=settings.pagination.default_page_size,
        )
