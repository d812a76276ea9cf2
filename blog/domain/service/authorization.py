"""Authorization policy.

Every endpoint that reads a restricted resource or mutates anything asks
``decide`` first. The function is pure: it looks only at the actor, the
action and the target, never at storage.

Rules, first match wins:

1. Anonymous actors may read published posts, list posts and register.
2. Nobody may delete or demote their own user record.
3. Admins may do everything else.
4. Authors may read, update and delete their posts; users may read and
   update their own record.
5. Any signed-in user may read published posts, list posts, create posts
   and users (plain role), and like or comment on any post.
6. Everything else is forbidden.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from blog.domain.error import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
)
from blog.domain.model.post import Post
from blog.domain.model.user import User
from blog.domain.value import Role, UserId


class Action(str, Enum):
    """Something an actor attempts on a resource."""

    READ = "read"
    READ_LIST = "read-list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ENGAGE = "engage"
    PROMOTE = "promote"
    DEMOTE = "demote"
    MODERATE = "moderate"


class ResourceKind(str, Enum):
    """Collection-level target, used when there is no concrete record yet."""

    POST = "post"
    USER = "user"


class DenialKind(str, Enum):
    """Why a decision was negative. Decides which error is raised."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    SELF_TARGET = "self_target"


Resource = Union[Post, User, ResourceKind]


@dataclass(frozen=True)
class Actor:
    """Identity attempting an action. Both fields are None when anonymous."""

    user_id: Optional[UserId] = None
    role: Optional[Role] = None

    @classmethod
    def anonymous(cls) -> "Actor":
        return cls()

    @classmethod
    def for_user(cls, user: User) -> "Actor":
        return cls(user_id=user.id, role=user.role)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role == Role.ADMIN


@dataclass(frozen=True)
class Decision:
    """Outcome of a policy check."""

    allowed: bool
    denial: Optional[DenialKind] = None
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, denial: DenialKind, reason: str) -> "Decision":
        return cls(allowed=False, denial=denial, reason=reason)


_SELF_TARGET_REASONS = {
    Action.DELETE: "You cannot delete your own account",
    Action.DEMOTE: "You cannot change your own role",
}

_FORBIDDEN_POST_REASONS = {
    Action.READ: "Access denied",
    Action.UPDATE: "Not authorized to update this blog",
    Action.DELETE: "Not authorized to delete this blog",
    Action.MODERATE: "Admin access required",
}


def _is_published_post(resource: Resource) -> bool:
    return isinstance(resource, Post) and resource.is_published


def _anonymous_allowed(action: Action, resource: Resource) -> bool:
    if action == Action.READ:
        return _is_published_post(resource)
    if action == Action.READ_LIST:
        return resource == ResourceKind.POST
    if action == Action.CREATE:
        return resource == ResourceKind.USER
    return False


def _owner_allowed(actor: Actor, action: Action, resource: Resource) -> bool:
    if isinstance(resource, Post):
        return resource.is_authored_by(actor.user_id) and action in (
            Action.READ,
            Action.UPDATE,
            Action.DELETE,
        )
    if isinstance(resource, User):
        return resource.id == actor.user_id and action in (Action.READ, Action.UPDATE)
    return False


def _member_allowed(action: Action, resource: Resource) -> bool:
    if action == Action.READ:
        return _is_published_post(resource)
    if action == Action.READ_LIST:
        return resource == ResourceKind.POST
    if action == Action.CREATE:
        return resource in (ResourceKind.POST, ResourceKind.USER)
    if action == Action.ENGAGE:
        return isinstance(resource, Post)
    return False


def _forbidden_reason(action: Action, resource: Resource) -> str:
    if isinstance(resource, Post) or resource == ResourceKind.POST:
        return _FORBIDDEN_POST_REASONS.get(action, "Access denied")
    return "Admin access required"


def decide(actor: Actor, action: Action, resource: Resource) -> Decision:
    """Decide whether ``actor`` may perform ``action`` on ``resource``.

    Args:
        actor: Caller identity (possibly anonymous)
        action: Attempted action
        resource: Target record, or the kind of record for collection
            and creation actions

    Returns:
        Allowing decision, or a denial carrying its kind and a reason
    """
    if not actor.is_authenticated:
        if _anonymous_allowed(action, resource):
            return Decision.allow()
        return Decision.deny(DenialKind.UNAUTHENTICATED, "Authentication required")

    if (
        action in _SELF_TARGET_REASONS
        and isinstance(resource, User)
        and resource.id == actor.user_id
    ):
        return Decision.deny(DenialKind.SELF_TARGET, _SELF_TARGET_REASONS[action])

    if actor.is_admin:
        return Decision.allow()

    if _owner_allowed(actor, action, resource) or _member_allowed(action, resource):
        return Decision.allow()

    return Decision.deny(DenialKind.FORBIDDEN, _forbidden_reason(action, resource))


def enforce(decision: Decision) -> None:
    """Raise the domain error matching a denial. Does nothing when allowed.

    Raises:
        AuthenticationError: Anonymous caller on a protected action
        AuthorizationError: Signed-in caller lacking rights
        BusinessRuleViolationError: Caller targeting their own record
    """
    if decision.allowed:
        return
    reason = decision.reason or "Access denied"
    if decision.denial == DenialKind.UNAUTHENTICATED:
        raise AuthenticationError(reason)
    if decision.denial == DenialKind.SELF_TARGET:
        raise BusinessRuleViolationError(reason)
    raise AuthorizationError(reason)


def authorize(actor: Actor, action: Action, resource: Resource) -> None:
    """Shorthand for ``enforce(decide(actor, action, resource))``."""
    enforce(decide(actor, action, resource))


def require_authenticated(actor: Actor) -> UserId:
    """Return the actor's user ID, or raise for anonymous actors.

    Raises:
        AuthenticationError: If the actor is anonymous
    """
    if actor.user_id is None:
        raise AuthenticationError("Authentication required")
    return actor.user_id
