"""Domain services."""

from .authorization import (
    Action,
    Actor,
    Decision,
    DenialKind,
    ResourceKind,
    authorize,
    decide,
    enforce,
    require_authenticated,
)
from .base import Service
from .engagement_service import EngagementService
from .jwt_service import JWTService
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "Action",
    "Actor",
    "Decision",
    "DenialKind",
    "EngagementService",
    "JWTService",
    "PasswordService",
    "PostService",
    "ResourceKind",
    "Service",
    "UserService",
    "authorize",
    "decide",
    "enforce",
    "require_authenticated",
]
