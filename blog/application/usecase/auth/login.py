"""Login use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: UserView
    token: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token.

        Raises:
            AuthenticationError: Unknown email or wrong password
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(user)
            return LoginResponse(user=UserView.from_user(user), token=token)
