"""Authentication of request callers."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.models import UserRecord
from macro_tracker.errors import UnauthorizedError


class IdentityProvider(Protocol):
    """Interface for the external authentication provider."""

    def get_user(self, access_token: str) -> UserRecord | None:
        """Return the user owning a session token, if the token is valid."""


@dataclass
class UserService:
    """Application service resolving the current user."""

    identity_provider: IdentityProvider

    def current_user(self, authorization: str | None) -> UserRecord:
        """Resolve an ``Authorization: Bearer`` header value to a user."""
        token = _bearer_token(authorization)
        if token is None:
            raise UnauthorizedError("Unauthorized")
        user = self.identity_provider.get_user(token)
        if user is None:
            raise UnauthorizedError("Unauthorized")
        return user


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
