"""User domain service."""

from typing import Optional

import logfire

from blog.domain.error import ConflictError
from blog.domain.model import User, UserStats
from blog.domain.repository import (
    CommentColumn,
    CommentRepository,
    PostColumn,
    PostRepository,
    ReviewColumn,
    ReviewRepository,
    UserColumn,
    UserRepository,
)
from blog.domain.value import UserId

from .base import Service
from .credential import CredentialService


class UserService(Service):
    """Domain service for user operations.

    Users handed back to callers never carry the password hash.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        review_repository: ReviewRepository,
        credential_service: CredentialService,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            post_repository: Post repository (for stats)
            comment_repository: Comment repository (for stats)
            review_repository: Review repository (for stats)
            credential_service: Password hashing service
        """
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.review_repository = review_repository
        self.credential_service = credential_service

    async def _ensure_available(
        self, username: str, email: str, user_id: Optional[UserId] = None
    ) -> None:
        """Reject a username or email already used by another account.

        Deleted accounts keep their username and email reserved.

        Raises:
            ConflictError: If either value is taken
        """
        for value, column in (
            (username, UserColumn.USERNAME),
            (email, UserColumn.EMAIL),
        ):
            owners = await self.user_repository.find_by(
                value, column, include_deleted=True
            )
            if any(owner.id != user_id for owner in owners):
                logfire.warn("User field already taken", field=column.value)
                raise ConflictError("user", f"{column.value} already taken")

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Create an account.

        Args:
            username: Unique username (4-12 characters)
            email: Unique email address
            password: Plaintext password, hashed before storage
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            The created user, without password

        Raises:
            ConflictError: If the username or email is taken
        """
        with logfire.span("user_service.register", username=username):
            await self._ensure_available(username, email)

            user = User(
                username=username,
                email=email,
                first_name=first_name,
                last_name=last_name,
                password=self.credential_service.hash(password),
            )
            created = await self.user_repository.create(user)

            logfire.info("User registered", user_id=created.id, username=username)
            return created.without_password()

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """Check a username and password pair.

        Args:
            username: Username
            password: Plaintext password

        Returns:
            The user, without password, if the credentials match; None otherwise
        """
        with logfire.span("user_service.authenticate", username=username):
            user = await self.user_repository.find_one_by(username, UserColumn.USERNAME)

            if user is None or not user.password:
                logfire.warn("Authentication failed: unknown user", username=username)
                return None

            if not self.credential_service.verify(password, user.password):
                logfire.warn("Authentication failed: bad password", username=username)
                return None

            logfire.info("User authenticated", user_id=user.id)
            return user.without_password()

    async def get_user(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID.

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user", user_id=user_id):
            user = await self.user_repository.get(user_id)
            if user is None:
                logfire.warn("User not found", user_id=user_id)
                return None
            return user.without_password()

    async def list_users(self, page: int = 1, page_size: int = 0) -> list[User]:
        """List users, newest first."""
        with logfire.span("user_service.list_users", page=page, page_size=page_size):
            users = await self.user_repository.get_all(page, page_size)
            return [user.without_password() for user in users]

    async def update_user(
        self,
        user_id: UserId,
        username: Optional[str] = None,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Optional[User]:
        """Update account fields; fields left as None keep their value.

        Returns:
            The updated user, without password, or None if not found

        Raises:
            ConflictError: If the new username or email is taken
        """
        with logfire.span("user_service.update_user", user_id=user_id):
            current = await self.user_repository.get(user_id)
            if current is None:
                logfire.warn("User not found for update", user_id=user_id)
                return None

            changes = {
                key: value
                for key, value in {
                    "username": username,
                    "email": email,
                    "first_name": first_name,
                    "last_name": last_name,
                }.items()
                if value is not None
            }
            if password is not None:
                changes["password"] = self.credential_service.hash(password)

            candidate = User(**{**current.model_dump(), **changes})
            await self._ensure_available(
                candidate.username, candidate.email, user_id=user_id
            )

            updated = await self.user_repository.update(user_id, candidate)
            if updated is None:
                return None

            logfire.info(
                "User updated", user_id=user_id, fields=sorted(changes.keys())
            )
            return updated.without_password()

    async def delete_user(self, user_id: UserId) -> bool:
        """Soft-delete an account.

        Returns:
            True if the account was live and is now deleted
        """
        with logfire.span("user_service.delete_user", user_id=user_id):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User delete", user_id=user_id, deleted=deleted)
            return deleted

    async def get_user_stats(self, user_id: UserId) -> Optional[UserStats]:
        """Count a user's live posts, comments and reviews.

        Returns:
            Stats, or None if the user does not exist
        """
        with logfire.span("user_service.get_user_stats", user_id=user_id):
            if await self.user_repository.get(user_id) is None:
                logfire.warn("User not found for stats", user_id=user_id)
                return None

            return UserStats(
                post_count=await self.post_repository.count_by(
                    user_id, PostColumn.AUTHOR_ID
                ),
                comments_count=await self.comment_repository.count_by(
                    user_id, CommentColumn.USER_ID
                ),
                reviews_count=await self.review_repository.count_by(
                    user_id, ReviewColumn.USER_ID
                ),
            )
