"""Recipe endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from macro_tracker.api.dependencies import get_container, require_user
from macro_tracker.api.schemas import (
    LogRecipeRequest,
    PromoteMealRequest,
    serialize_logged_meal,
    serialize_recipe,
)
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import UserRecord
from macro_tracker.domain.recipes import RecipeDraft, RecipePatch

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the user's recipes ordered by name."""
    recipes = container.recipe_service.list_recipes(user.id)
    return {"recipes": [serialize_recipe(recipe) for recipe in recipes]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    draft: RecipeDraft,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a recipe from explicit values."""
    recipe = container.recipe_service.create_recipe(user.id, draft)
    return {"recipe": serialize_recipe(recipe)}


@router.post("/from-meal/{meal_id}", status_code=status.HTTP_201_CREATED)
async def create_recipe_from_meal(
    meal_id: UUID,
    body: PromoteMealRequest | None = None,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Save a logged meal's values as a recipe."""
    name = body.name if body else None
    recipe = container.recipe_service.create_from_meal(user.id, meal_id, name=name)
    return {"recipe": serialize_recipe(recipe)}


@router.get("/{recipe_id}")
async def get_recipe(
    recipe_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a single recipe."""
    recipe = container.recipe_service.get_recipe(recipe_id, user.id)
    return {"recipe": serialize_recipe(recipe)}


@router.patch("/{recipe_id}")
async def rename_recipe(
    recipe_id: UUID,
    patch: RecipePatch,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rename a recipe."""
    recipe = container.recipe_service.rename_recipe(recipe_id, user.id, patch)
    return {"recipe": serialize_recipe(recipe)}


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: UUID,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Delete a recipe. Meals logged from it are kept as they are."""
    container.recipe_service.delete_recipe(recipe_id, user.id)
    return {"success": True}


@router.post("/{recipe_id}/log", status_code=status.HTTP_201_CREATED)
async def log_recipe(
    recipe_id: UUID,
    body: LogRecipeRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a copy of the recipe's macros as a meal for today."""
    logged = container.meal_service.log_from_recipe(
        user.id, recipe_id, body.meal_type
    )
    return serialize_logged_meal(logged)
