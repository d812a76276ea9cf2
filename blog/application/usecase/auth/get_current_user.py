"""Get current user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.domain.error import AuthenticationError, NotFoundError
from blog.domain.service import JWTService, UserService
from blog.domain.value import UserId
from blog.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserView


class GetCurrentUserUseCase:
    """Use case for resolving a session token to its user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from the ID in the token
        3. Return user info (the role comes from storage, not the token)

        Raises:
            AuthenticationError: If the token is invalid or expired, or
                its user no longer exists
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.user_id))
        except JWTError as e:
            raise AuthenticationError(str(e)) from e
        except ValueError as e:
            raise AuthenticationError("Invalid token") from e

        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError as e:
            logfire.warn("Token for deleted user", user_id=str(user_id))
            raise AuthenticationError("User not found") from e

        return GetCurrentUserResponse(user=UserView.from_user(user))
