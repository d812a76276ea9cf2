"""Create first admin use case."""

import hmac

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.config import AuthSettings
from blog.domain.error import AuthorizationError, InvalidStateError
from blog.domain.service import JWTService, UserService
from blog.domain.value import Role


class CreateFirstAdminRequest(BaseModel):
    """Create first admin request."""

    admin_key: str
    name: str
    email: str
    password: str


class CreateFirstAdminResponse(BaseModel):
    """Create first admin response."""

    user: UserView
    token: str


class CreateFirstAdminUseCase:
    """Use case for bootstrapping the first admin account.

    Works only while no admin exists and only with the configured
    creation key. An unset key disables the bootstrap.
    """

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize create first admin use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            auth_settings: Authentication settings (creation key)
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def execute(
        self, request: CreateFirstAdminRequest
    ) -> CreateFirstAdminResponse:
        """Execute bootstrap flow.

        Steps:
        1. Count admins (no cached flag, queried on every call)
        2. Compare the creation key
        3. Create the admin and issue a token

        Raises:
            InvalidStateError: If an admin already exists
            AuthorizationError: If the key is wrong or bootstrap is disabled
            DuplicateError: If the email is already registered
        """
        with logfire.span("create_first_admin.execute"):
            if await self.user_service.count_admins() > 0:
                logfire.warn("First admin bootstrap attempted with existing admin")
                raise InvalidStateError("Admin already exists")

            expected = self.auth_settings.admin_creation_key
            if not expected or not hmac.compare_digest(
                request.admin_key.encode("utf-8"), expected.encode("utf-8")
            ):
                logfire.warn("First admin bootstrap with invalid key")
                raise AuthorizationError("Invalid admin creation key")

            user = await self.user_service.create_user(
                name=request.name,
                email=request.email,
                password=request.password,
                role=Role.ADMIN,
            )
            token = self.jwt_service.create_token(user)
            logfire.info("First admin created", user_id=str(user.id))

            return CreateFirstAdminResponse(user=UserView.from_user(user), token=token)
