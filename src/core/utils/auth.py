"""Caller identity taken from the API Gateway authorizer context."""

from typing import Any

from aws_lambda_powertools import Logger
from bson import ObjectId
from pydantic import BaseModel, ConfigDict

from core.models.errors import AuthenticationError, ForbiddenError
from core.utils.constants import ROLE_ADMIN

logger = Logger(UTC=True)


class AuthUser(BaseModel):
    """The authenticated caller of a request."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    user_id: ObjectId
    roles: frozenset[str] = frozenset()

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles


def _parse_roles(raw: Any) -> frozenset[str]:
    # Authorizer context values are strings, so roles arrive comma-separated.
    if isinstance(raw, str):
        return frozenset(role.strip() for role in raw.split(",") if role.strip())
    if isinstance(raw, (list, tuple)):
        return frozenset(str(role).strip() for role in raw if str(role).strip())
    return frozenset()


def get_current_user(event: dict[str, Any]) -> AuthUser:
    """Return the caller placed on the request by the authorizer.

    Raises:
        AuthenticationError: If the request carries no valid identity
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    user_id = authorizer.get("userId")

    if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
        logger.warning("Request without a valid caller identity")
        raise AuthenticationError()

    return AuthUser(user_id=ObjectId(user_id), roles=_parse_roles(authorizer.get("roles")))


def require_admin(event: dict[str, Any]) -> AuthUser:
    """Return the caller, requiring the admin role.

    Raises:
        AuthenticationError: If the request carries no valid identity
        ForbiddenError: If the caller is not an admin
    """
    user = get_current_user(event)
    if not user.is_admin:
        logger.warning("Admin role required", extra={"user_id": str(user.user_id)})
        raise ForbiddenError()
    return user
