"""Update profile use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.domain.service import (
    Action,
    Actor,
    UserService,
    authorize,
    require_authenticated,
)


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only the fields listed here can be changed through the profile.
    """

    actor: Actor
    name: Optional[str] = None
    email: Optional[str] = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    user: UserView


class UpdateProfileUseCase:
    """Use case for a user changing their own name or email."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            AuthenticationError: If the caller is anonymous
            DuplicateError: If the new email belongs to someone else
        """
        user_id = require_authenticated(request.actor)
        with logfire.span("update_profile.execute", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)
            authorize(request.actor, Action.UPDATE, user)

            saved = await self.user_service.update_profile(
                user, name=request.name, email=request.email
            )
            return UpdateProfileResponse(user=UserView.from_user(saved))
