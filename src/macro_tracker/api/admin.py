"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from macro_tracker.api.schemas import serialize_totals

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/users/{user_id}/totals/{day}/recompute",
    dependencies=[Depends(require_admin)],
)
async def recompute_day(
    user_id: UUID, day: date, request: Request
) -> dict[str, object]:
    """Reset one day's totals to the sum of its meals."""
    container: AppContainer = request.app.state.container
    totals = container.admin_service.recompute_day(user_id, day)
    return {"totals": serialize_totals(totals)}


@router.post("/users/{user_id}/totals/rebuild", dependencies=[Depends(require_admin)])
async def rebuild_totals(
    user_id: UUID, request: Request, days: int = 7
) -> dict[str, object]:
    """Recompute every day of the trailing window for a user."""
    container: AppContainer = request.app.state.container
    rebuilt = container.admin_service.rebuild_window(user_id, days)
    return {"totals": [serialize_totals(entry) for entry in rebuilt]}
