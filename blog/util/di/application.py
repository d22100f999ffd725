"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import LoginUseCase
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostDetailUseCase,
    GetPostUseCase,
    ListPostsByAuthorUseCase,
    ListPostsUseCase,
    LoadFeedUseCase,
    ReplacePostTagsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.review import (
    DeleteReviewUseCase,
    ListReviewsUseCase,
    SubmitReviewUseCase,
    UpdateReviewUseCase,
)
from blog.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    TopTagsUseCase,
    UpdateTagUseCase,
)
from blog.application.usecase.user import (
    DeleteUserUseCase,
    GetUserStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from blog.config import Settings
from blog.domain.service import (
    CommentService,
    PostAggregationService,
    PostService,
    ReviewService,
    TagService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, user_service: UserService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_stats_use_case(
        self, user_service: UserService
    ) -> GetUserStatsUseCase:
        """Provide user stats use case."""
        return GetUserStatsUseCase(user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, aggregation_service: PostAggregationService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        aggregation_service: PostAggregationService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, aggregation_service=aggregation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_replace_post_tags_use_case(
        self,
        post_service: PostService,
        aggregation_service: PostAggregationService,
    ) -> ReplacePostTagsUseCase:
        """Provide replace post tags use case."""
        return ReplacePostTagsUseCase(
            post_service=post_service, aggregation_service=aggregation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_load_feed_use_case(
        self, aggregation_service: PostAggregationService
    ) -> LoadFeedUseCase:
        """Provide feed use case."""
        return LoadFeedUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_post_detail_use_case(
        self, aggregation_service: PostAggregationService
    ) -> GetPostDetailUseCase:
        """Provide post detail use case."""
        return GetPostDetailUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_by_author_use_case(
        self, aggregation_service: PostAggregationService
    ) -> ListPostsByAuthorUseCase:
        """Provide posts-by-author use case."""
        return ListPostsByAuthorUseCase(aggregation_service=aggregation_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(self, tag_service: TagService) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_top_tags_use_case(self, tag_service: TagService) -> TopTagsUseCase:
        """Provide top tags use case."""
        return TopTagsUseCase(tag_service=tag_service)

    # Review use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_review_use_case(
        self, review_service: ReviewService
    ) -> SubmitReviewUseCase:
        """Provide submit review use case."""
        return SubmitReviewUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reviews_use_case(
        self, review_service: ReviewService
    ) -> ListReviewsUseCase:
        """Provide list reviews use case."""
        return ListReviewsUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_update_review_use_case(
        self, review_service: ReviewService
    ) -> UpdateReviewUseCase:
        """Provide update review use case."""
        return UpdateReviewUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_review_use_case(
        self, review_service: ReviewService
    ) -> DeleteReviewUseCase:
        """Provide delete review use case."""
        return DeleteReviewUseCase(review_service=review_service)
