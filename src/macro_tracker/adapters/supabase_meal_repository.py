"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.meals import Meal, MealType, NewMeal
from macro_tracker.errors import StorageError
from macro_tracker.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, user_id, day, description, meal_type, calories, protein_g, fat_g, "
    "carbs_g, created_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, meal: NewMeal) -> Meal:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(meal.user_id),
                    "day": meal.day.isoformat(),
                    "description": meal.description,
                    "meal_type": meal.meal_type.value,
                    "calories": meal.macros.calories,
                    "protein_g": meal.macros.protein_g,
                    "fat_g": meal.macros.fat_g,
                    "carbs_g": meal.macros.carbs_g,
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to create meal")
        return _parse_meal(response.data[0])

    def get_meal(self, meal_id: UUID, user_id: UUID) -> Meal | None:
        """Return a meal by id for the user."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: UUID, day: date) -> list[Meal]:
        """Return a day's meals, newest first."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def update_meal_type(
        self, meal_id: UUID, user_id: UUID, meal_type: MealType
    ) -> Meal | None:
        """Update the meal type of a meal owned by the user."""
        response = (
            self.client.table("meals")
            .update({"meal_type": meal_type.value})
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> bool:
        """Delete a meal owned by the user."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["day"])),
        description=str(row.get("description", "")),
        meal_type=MealType(str(row.get("meal_type", MealType.BREAKFAST))),
        calories=float(row.get("calories", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
