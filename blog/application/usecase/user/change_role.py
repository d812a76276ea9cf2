"""Change role use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import UserView
from blog.domain.service import Action, Actor, ResourceKind, UserService, authorize
from blog.domain.value import Role, UserId


class ChangeRoleRequest(BaseModel):
    """Change role request."""

    actor: Actor
    user_id: UserId
    role: Role


class ChangeRoleResponse(BaseModel):
    """Change role response."""

    user: UserView
    message: str


class ChangeRoleUseCase:
    """Use case for promoting a user to admin or demoting an admin."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize change role use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ChangeRoleRequest) -> ChangeRoleResponse:
        """Execute change role flow.

        Steps:
        1. Reject non-admins before touching storage
        2. Load the target user
        3. Re-check against the concrete target (no self-demotion)
        4. Save the new role

        Raises:
            AuthorizationError: If the caller is not an admin
            BusinessRuleViolationError: If an admin demotes themselves
            NotFoundError: If the target user does not exist
        """
        action = Action.PROMOTE if request.role == Role.ADMIN else Action.DEMOTE
        with logfire.span(
            "change_role.execute", user_id=str(request.user_id), role=request.role.value
        ):
            if request.actor.user_id != request.user_id:
                authorize(request.actor, action, ResourceKind.USER)

            target = await self.user_service.get_by_id(request.user_id)
            authorize(request.actor, action, target)

            saved = await self.user_service.change_role(target, request.role)
            verb = "promoted to" if request.role == Role.ADMIN else "demoted from"
            return ChangeRoleResponse(
                user=UserView.from_user(saved),
                message=f"User {verb} admin successfully",
            )
