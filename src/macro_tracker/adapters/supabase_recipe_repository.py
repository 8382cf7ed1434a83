"""Supabase implementation for saved recipes."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.recipes import Recipe, RecipeDraft, quantize_macro
from macro_tracker.errors import StorageError
from macro_tracker.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def create_recipe(self, user_id: UUID, draft: RecipeDraft) -> Recipe:
        """Create a recipe row and return it."""
        response = (
            self.client.table("recipes")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": draft.name,
                    "description": draft.description,
                    # numeric(10, 2) columns; strings keep the exact decimal.
                    "calories": str(draft.calories),
                    "protein_g": str(draft.protein_g),
                    "fat_g": str(draft.fat_g),
                    "carbs_g": str(draft.carbs_g),
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def list_recipes(self, user_id: UUID) -> list[Recipe]:
        """Return the user's recipes ordered by name."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("user_id", str(user_id))
            .order("name", desc=False)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID, user_id: UUID) -> Recipe | None:
        """Return a recipe by id for the user."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def rename_recipe(self, recipe_id: UUID, user_id: UUID, name: str) -> Recipe | None:
        """Rename a recipe owned by the user."""
        response = (
            self.client.table("recipes")
            .update({"name": name, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(recipe_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID, user_id: UUID) -> bool:
        """Delete a recipe owned by the user."""
        response = (
            self.client.table("recipes")
            .delete()
            .eq("id", str(recipe_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    return Recipe(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        calories=quantize_macro(row.get("calories", 0)),
        protein_g=quantize_macro(row.get("protein_g", 0)),
        fat_g=quantize_macro(row.get("fat_g", 0)),
        carbs_g=quantize_macro(row.get("carbs_g", 0)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
