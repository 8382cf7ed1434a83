"""Services for managing saved recipes."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import pydantic

from macro_tracker.domain.recipes import (
    MAX_NAME_LENGTH,
    Recipe,
    RecipeDraft,
    RecipePatch,
)
from macro_tracker.errors import NotFoundError, ValidationError
from macro_tracker.services.meals import MealRepository


class RecipeRepository(Protocol):
    """Persistence interface for recipes. Every query is scoped by user."""

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Create a recipe and return it."""

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return the user's recipes ordered by name."""

    def get_recipe(self, recipe_id: UUID, user_id: UUID) -> Recipe | None:
        """Return a recipe by id, if it belongs to the user."""

    def rename_recipe(self, recipe_id: UUID, user_id: UUID, name: str) -> Recipe | None:
        """Rename a recipe and return it, or None when no row matched."""

    def delete_recipe(self, recipe_id: UUID, user_id: UUID) -> bool:
        """Delete a recipe and report whether a row matched."""


@dataclass
class RecipeService:
    """Application service for recipe operations.

    Recipes are templates. Logging one copies its values into a new meal, so
    renaming or deleting a recipe never changes meals logged from it.
    """

    repository: RecipeRepository
    meal_repository: MealRepository

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Create a recipe from explicit values."""
        return self.repository.create_recipe(user_id, draft)

    def create_from_meal(
        self, user_id: UUID, meal_id: UUID, name: str | None = None
    ) -> Recipe:
        """Save a logged meal's values as a new recipe.

        Without a name, the meal description is used, cut to the name limit.
        """
        meal = self.meal_repository.get_meal(meal_id, user_id)
        if meal is None:
            raise NotFoundError("Meal not found")
        try:
            draft = RecipeDraft(
                name=meal.description[:MAX_NAME_LENGTH] if name is None else name,
                description=meal.description,
                calories=meal.calories,
                protein_g=meal.protein_g,
                fat_g=meal.fat_g,
                carbs_g=meal.carbs_g,
            )
        except pydantic.ValidationError as exc:
            message = exc.errors()[0].get("msg", "invalid value")
            raise ValidationError(f"Invalid recipe: {message}") from exc
        return self.repository.create_recipe(user_id, draft)

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return the user's recipes ordered by name."""
        return self.repository.list_recipes(user_id)

    def get_recipe(self, recipe_id: UUID, user_id: UUID) -> Recipe:
        """Return a recipe or raise NotFoundError."""
        recipe = self.repository.get_recipe(recipe_id, user_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    def rename_recipe(
        self, recipe_id: UUID, user_id: UUID, patch: RecipePatch
    ) -> Recipe:
        """Apply a name change."""
        recipe = self.repository.rename_recipe(recipe_id, user_id, patch.name)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    def delete_recipe(self, recipe_id: UUID, user_id: UUID) -> None:
        """Delete a recipe."""
        if not self.repository.delete_recipe(recipe_id, user_id):
            raise NotFoundError("Recipe not found")
