"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request

from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def require_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> UserRecord:
    """Resolve the bearer token to the current user or fail with 401."""
    return container.user_service.current_user(authorization)
