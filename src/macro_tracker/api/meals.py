"""Meal endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, status

from macro_tracker.api.dependencies import get_container, require_user
from macro_tracker.api.schemas import (
    LogMealRequest,
    serialize_day,
    serialize_logged_meal,
    serialize_meal,
    serialize_totals,
)
from macro_tracker.containers import AppContainer
from macro_tracker.domain.meals import MealPatch
from macro_tracker.domain.models import UserRecord

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
async def list_meals(
    day: date | None = None,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a day's meals with its totals. Defaults to today."""
    return serialize_day(container.meal_service.get_day(user.id, day))


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_meal(
    body: LogMealRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Estimate a free-text meal and log it for today."""
    logged = await container.meal_service.log_from_text(
        user.id, body.description, body.meal_type
    )
    return serialize_logged_meal(logged)


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single meal."""
    return {"meal": serialize_meal(container.meal_service.get_meal(meal_id, user.id))}


@router.patch("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    patch: MealPatch,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Change a meal's type."""
    meal = container.meal_service.update_meal(meal_id, user.id, patch)
    return {"meal": serialize_meal(meal)}


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete a meal and return the refreshed day totals."""
    totals = container.meal_service.delete_meal(meal_id, user.id)
    return {"success": True, "totals": serialize_totals(totals)}
