"""History endpoints."""

from fastapi import APIRouter, Depends

from macro_tracker.api.dependencies import get_container, require_user
from macro_tracker.api.schemas import serialize_totals, serialize_window
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def recent_totals(
    days: int | None = None,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return stored day totals for the trailing window, newest first."""
    totals = container.history_reader.list_recent_totals(user.id, days)
    return {"totals": [serialize_totals(entry) for entry in totals]}


@router.get("/summary")
async def window_summary(
    days: int | None = None,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return every day of the window, missing days as zero, with averages."""
    summary = container.history_reader.summarize_window(user.id, days)
    return serialize_window(summary)
