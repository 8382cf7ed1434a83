"""Request models and response serializers for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from macro_tracker.domain.meals import DayLog, LoggedMeal, Meal, MealType
from macro_tracker.domain.recipes import (
    MAX_NAME_LENGTH,
    Recipe,
    normalize_recipe_name,
)
from macro_tracker.domain.totals import DailyTotals
from macro_tracker.services.history import WindowSummary


class LogMealRequest(BaseModel):
    """Free-text meal to estimate and log."""

    model_config = ConfigDict(extra="forbid")

    description: str = Field(min_length=1, max_length=2000)
    meal_type: MealType


class LogRecipeRequest(BaseModel):
    """Meal slot for a recipe logged as a meal."""

    model_config = ConfigDict(extra="forbid")

    meal_type: MealType


class PromoteMealRequest(BaseModel):
    """Optional name for a recipe saved from a meal."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=MAX_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str | None) -> str | None:
        return None if value is None else normalize_recipe_name(value)


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "day": meal.day.isoformat(),
        "description": meal.description,
        "meal_type": meal.meal_type.value,
        "calories": meal.calories,
        "protein_g": meal.protein_g,
        "fat_g": meal.fat_g,
        "carbs_g": meal.carbs_g,
        "created_at": meal.created_at.isoformat(),
    }


def serialize_totals(totals: DailyTotals) -> dict[str, object]:
    return {
        "day": totals.day.isoformat(),
        "total_calories": totals.calories,
        "total_protein_g": totals.protein_g,
        "total_fat_g": totals.fat_g,
        "total_carbs_g": totals.carbs_g,
        "updated_at": totals.updated_at.isoformat() if totals.updated_at else None,
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "description": recipe.description,
        "calories": float(recipe.calories),
        "protein_g": float(recipe.protein_g),
        "fat_g": float(recipe.fat_g),
        "carbs_g": float(recipe.carbs_g),
        "created_at": recipe.created_at.isoformat(),
        "updated_at": recipe.updated_at.isoformat(),
    }


def serialize_logged_meal(logged: LoggedMeal) -> dict[str, object]:
    return {
        "meal": serialize_meal(logged.meal),
        "totals": serialize_totals(logged.totals),
    }


def serialize_day(day_log: DayLog) -> dict[str, object]:
    return {
        "day": day_log.day.isoformat(),
        "meals": [serialize_meal(meal) for meal in day_log.meals],
        "totals": serialize_totals(day_log.totals),
    }


def serialize_window(summary: WindowSummary) -> dict[str, object]:
    return {
        "daily": [serialize_totals(entry) for entry in summary.daily],
        "averages": {
            "calories": summary.avg_calories,
            "protein_g": summary.avg_protein_g,
            "fat_g": summary.avg_fat_g,
            "carbs_g": summary.avg_carbs_g,
        },
    }
