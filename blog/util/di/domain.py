"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import (
    EngagementService,
    JWTService,
    PasswordService,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        password_service: PasswordService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_repository=post_repository,
            password_service=password_service,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_engagement_service(
        self, post_repository: PostRepository
    ) -> EngagementService:
        """Provide likes and comments service."""
        return EngagementService(post_repository=post_repository)
