"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    CreateFirstAdminUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from blog.application.usecase.engagement import AddCommentUseCase, ToggleLikeUseCase
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    SetPostStatusUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.user import (
    ChangeRoleUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateProfileUseCase,
)
from blog.config import AuthSettings, PaginationSettings
from blog.domain.service import (
    EngagementService,
    JWTService,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_create_first_admin_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> CreateFirstAdminUseCase:
        """Provide first admin bootstrap use case."""
        return CreateFirstAdminUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # User management use cases
    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, user_service: UserService, pagination_settings: PaginationSettings
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(
            user_service=user_service, pagination_settings=pagination_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_change_role_use_case(self, user_service: UserService) -> ChangeRoleUseCase:
        """Provide change role use case."""
        return ChangeRoleUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_my_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_set_post_status_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> SetPostStatusUseCase:
        """Provide moderation use case."""
        return SetPostStatusUseCase(
            post_service=post_service, user_service=user_service
        )

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            post_service=post_service,
            engagement_service=engagement_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            post_service=post_service, engagement_service=engagement_service
        )
