"""Request authentication dependencies shared by the routes.

The session token travels as a ``Bearer`` header or as the ``auth_token``
cookie set by the frontend. Routes declare the caller they need::

    async def create_post(actor: CurrentActor, ...):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from blog.domain.error import AuthenticationError, ValidationError
from blog.domain.service import Actor
from blog.domain.value import PostId, UserId

AUTH_COOKIE = "auth_token"

# auto_error is off so a missing header falls through to the cookie and
# to our own 401 envelope
bearer_scheme = HTTPBearer(auto_error=False, description="Session token from login")


async def session_token(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
    auth_token: Annotated[Optional[str], Cookie(alias=AUTH_COOKIE)] = None,
) -> Optional[str]:
    """Session token from the Authorization header or the cookie.

    The ``Bearer`` header wins when both are present.
    """
    if credentials and credentials.credentials.strip():
        return credentials.credentials.strip()
    return auth_token or None


SessionToken = Annotated[Optional[str], Depends(session_token)]


@inject
async def current_user(
    token: SessionToken,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Resolve the caller's user record.

    Raises:
        AuthenticationError: If no token was sent, or it is invalid or
            expired, or its user no longer exists
    """
    if not token:
        raise AuthenticationError("Authentication required")
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


CurrentUser = Annotated[GetCurrentUserResponse, Depends(current_user)]


def _actor_from(response: GetCurrentUserResponse) -> Actor:
    return Actor(user_id=UserId(UUID(response.user.id)), role=response.user.role)


async def require_actor(user: CurrentUser) -> Actor:
    """Authenticated actor for endpoints that need an identity."""
    return _actor_from(user)


@inject
async def optional_actor(
    token: SessionToken,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> Actor:
    """Actor for endpoints open to anonymous callers.

    A missing, invalid or expired token yields the anonymous actor.
    """
    if not token:
        return Actor.anonymous()
    try:
        response = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except AuthenticationError as e:
        logfire.debug("Ignoring unusable token on optional-auth route", error=str(e))
        return Actor.anonymous()
    return _actor_from(response)


CurrentActor = Annotated[Actor, Depends(require_actor)]
OptionalActor = Annotated[Actor, Depends(optional_actor)]


def parse_post_id(value: str) -> PostId:
    """Parse a post ID from a path segment.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return PostId(UUID(value))
    except ValueError as e:
        raise ValidationError("Invalid blog ID") from e


def parse_user_id(value: str) -> UserId:
    """Parse a user ID from a path segment.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UserId(UUID(value))
    except ValueError as e:
        raise ValidationError("Invalid user ID") from e
