"""Authentication use cases."""

from .create_first_admin import (
    CreateFirstAdminRequest,
    CreateFirstAdminResponse,
    CreateFirstAdminUseCase,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "CreateFirstAdminRequest",
    "CreateFirstAdminResponse",
    "CreateFirstAdminUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
