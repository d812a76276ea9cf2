"""Authentication and user management routes."""

from typing import Annotated, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, EmailStr, Field, StringConstraints

from blog.application.usecase.auth import (
    CreateFirstAdminRequest,
    CreateFirstAdminResponse,
    CreateFirstAdminUseCase,
    GetCurrentUserResponse,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from blog.application.usecase.common import CamelModel, UserView
from blog.application.usecase.user import (
    ChangeRoleRequest,
    ChangeRoleUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from blog.domain.value import Role
from blog.interface.api.dependencies import (
    CurrentActor,
    CurrentUser,
    OptionalActor,
    parse_user_id,
)
from blog.interface.api.envelope import Envelope, ok

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]
Password = Annotated[str, Field(min_length=6)]


class CreateFirstAdminAPIRequest(CamelModel):
    """API request for bootstrapping the first admin."""

    admin_key: str = Field(min_length=1)
    name: Name
    email: EmailStr
    password: Password


class RegisterAPIRequest(CamelModel):
    """API request for registering an account."""

    name: Name
    email: EmailStr
    password: Password
    role: Role = Role.USER


class LoginAPIRequest(CamelModel):
    """API request for logging in."""

    email: EmailStr
    password: str = Field(min_length=1)


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the caller's profile."""

    name: Optional[Name] = None
    email: Optional[EmailStr] = None


class ChangeRoleAPIRequest(CamelModel):
    """API request for changing a user's role."""

    role: Role


class UserPayload(BaseModel):
    """Single user payload."""

    user: UserView


@router.post(
    "/create-first-admin",
    response_model=Envelope[CreateFirstAdminResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_first_admin(
    request: CreateFirstAdminAPIRequest,
    create_first_admin_use_case: FromDishka[CreateFirstAdminUseCase],
) -> Envelope[CreateFirstAdminResponse]:
    """Create the first admin account.

    Only works while no admin exists, and only with the configured
    admin creation key.
    """
    result = await create_first_admin_use_case.execute(
        CreateFirstAdminRequest(
            admin_key=request.admin_key,
            name=request.name,
            email=request.email,
            password=request.password,
        )
    )
    return ok(result, message="First admin created successfully")


@router.post(
    "/register",
    response_model=Envelope[RegisterResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterAPIRequest,
    actor: OptionalActor,
    register_use_case: FromDishka[RegisterUseCase],
) -> Envelope[RegisterResponse]:
    """Register a new account.

    Open to anonymous callers. Only an admin caller may register another
    admin.
    """
    result = await register_use_case.execute(
        RegisterRequest(
            actor=actor,
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
        )
    )
    return ok(result, message="User registered successfully")


@router.post("/login", response_model=Envelope[LoginResponse])
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> Envelope[LoginResponse]:
    """Exchange email and password for a session token."""
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    return ok(result, message="Login successful")


@router.get("/user-details", response_model=Envelope[GetCurrentUserResponse])
async def user_details(
    user: CurrentUser,
) -> Envelope[GetCurrentUserResponse]:
    """Return the authenticated caller's account."""
    return ok(user)


@router.put("/profile", response_model=Envelope[UpdateProfileResponse])
async def update_profile(
    request: UpdateProfileAPIRequest,
    actor: CurrentActor,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> Envelope[UpdateProfileResponse]:
    """Update the caller's name and/or email."""
    result = await update_profile_use_case.execute(
        UpdateProfileRequest(actor=actor, name=request.name, email=request.email)
    )
    return ok(result, message="Profile updated successfully")


@router.get("/users", response_model=Envelope[ListUsersResponse])
async def list_users(
    actor: CurrentActor,
    list_users_use_case: FromDishka[ListUsersUseCase],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
) -> Envelope[ListUsersResponse]:
    """List all users, newest first. Admin only."""
    result = await list_users_use_case.execute(
        ListUsersRequest(actor=actor, page=page, limit=limit)
    )
    return ok(result)


@router.put("/users/{user_id}/role", response_model=Envelope[UserPayload])
async def change_role(
    user_id: str,
    request: ChangeRoleAPIRequest,
    actor: CurrentActor,
    change_role_use_case: FromDishka[ChangeRoleUseCase],
) -> Envelope[UserPayload]:
    """Promote a user to admin or demote an admin. Admin only.

    Admins cannot change their own role.
    """
    target_id = parse_user_id(user_id)
    result = await change_role_use_case.execute(
        ChangeRoleRequest(actor=actor, user_id=target_id, role=request.role)
    )
    return ok(UserPayload(user=result.user), message=result.message)


@router.delete("/users/{user_id}", response_model=Envelope[None])
async def delete_user(
    user_id: str,
    actor: CurrentActor,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> Envelope[None]:
    """Delete a user together with their posts and likes. Admin only.

    Admins cannot delete themselves.
    """
    target_id = parse_user_id(user_id)
    await delete_user_use_case.execute(
        DeleteUserRequest(actor=actor, user_id=target_id)
    )
    return ok(message="User deleted successfully")
