"""Delete user use case."""

import logfire
from pydantic import BaseModel

from blog.domain.service import Action, Actor, ResourceKind, UserService, authorize
from blog.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    actor: Actor
    user_id: UserId


class DeleteUserUseCase:
    """Use case for an admin deleting an account.

    The user's posts are deleted with them, their likes disappear and
    their comments remain without an author.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Execute delete user flow.

        Raises:
            AuthorizationError: If the caller is not an admin
            BusinessRuleViolationError: If the caller targets themselves
            NotFoundError: If the target user does not exist
        """
        with logfire.span("delete_user.execute", user_id=str(request.user_id)):
            if request.actor.user_id != request.user_id:
                authorize(request.actor, Action.DELETE, ResourceKind.USER)

            target = await self.user_service.get_by_id(request.user_id)
            authorize(request.actor, Action.DELETE, target)

            await self.user_service.delete_user(target)
