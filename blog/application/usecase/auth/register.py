"""Register use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.domain.error import AuthorizationError
from blog.domain.service import (
    Action,
    Actor,
    JWTService,
    ResourceKind,
    UserService,
    decide,
    enforce,
)
from blog.domain.value import Role


class RegisterRequest(BaseModel):
    """Register request."""

    actor: Actor  # Caller, anonymous unless a valid token was sent
    name: str
    email: str
    password: str
    role: Role = Role.USER


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserView
    token: str


class RegisterUseCase:
    """Use case for creating an account with email and password.

    Anyone may register a plain user. Only an admin may create another admin.
    """

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Steps:
        1. Check the caller may create an account with the requested role
        2. Create the user (rejects duplicate emails)
        3. Issue a session token for the new user

        Raises:
            AuthorizationError: Non-admin caller asking for an admin account
            DuplicateError: If the email is already registered
        """
        with logfire.span("register.execute", role=request.role.value):
            if request.role == Role.ADMIN:
                decision = decide(request.actor, Action.PROMOTE, ResourceKind.USER)
                if not decision.allowed:
                    logfire.warn("Admin registration by non-admin rejected")
                    raise AuthorizationError("Only admins can create admin accounts")
            else:
                enforce(decide(request.actor, Action.CREATE, ResourceKind.USER))

            user = await self.user_service.create_user(
                name=request.name,
                email=request.email,
                password=request.password,
                role=request.role,
            )
            token = self.jwt_service.create_token(user)

            return RegisterResponse(user=UserView.from_user(user), token=token)
