"""User management use cases."""

from .change_role import ChangeRoleRequest, ChangeRoleResponse, ChangeRoleUseCase
from .delete_user import DeleteUserRequest, DeleteUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "ChangeRoleRequest",
    "ChangeRoleResponse",
    "ChangeRoleUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
