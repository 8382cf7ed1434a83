"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from macro_tracker.domain.meals import (
    DayLog,
    LoggedMeal,
    Meal,
    MealPatch,
    MealType,
    NewMeal,
)
from macro_tracker.domain.totals import DailyTotals
from macro_tracker.errors import NotFoundError
from macro_tracker.services.extraction import NutritionExtractionService
from macro_tracker.services.totals import TotalsAggregator

if TYPE_CHECKING:
    from macro_tracker.services.recipes import RecipeService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals. Every query is scoped by user."""

    def create_meal(self, meal: NewMeal) -> Meal:
        """Insert a meal and return the stored row."""

    def get_meal(self, meal_id: UUID, user_id: UUID) -> Meal | None:
        """Return a meal by id, if it belongs to the user."""

    def list_meals(self, user_id: UUID, day: date) -> list[Meal]:
        """Return a day's meals, most recently created first."""

    def update_meal_type(
        self, meal_id: UUID, user_id: UUID, meal_type: MealType
    ) -> Meal | None:
        """Change a meal's type and return it, or None when no row matched."""

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> bool:
        """Delete a meal and report whether a row matched."""


@dataclass
class MealService:
    """Service that logs meals and keeps day totals in step."""

    extraction_service: NutritionExtractionService
    recipe_service: "RecipeService"
    repository: MealRepository
    aggregator: TotalsAggregator
    timezone: str = "UTC"

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone)).date()

    async def log_from_text(
        self,
        user_id: UUID,
        description: str,
        meal_type: MealType,
        day: date | None = None,
    ) -> LoggedMeal:
        """Estimate macros for a description and persist it as a meal."""
        estimate = await self.extraction_service.extract(description)
        meal = self.repository.create_meal(
            NewMeal(
                user_id=user_id,
                day=day or self.today(),
                description=description.strip(),
                meal_type=meal_type,
                macros=estimate.to_macros(),
            )
        )
        _logger.info("Meal logged from text: meal_id=%s user_id=%s", meal.id, user_id)
        return LoggedMeal(meal=meal, totals=self.aggregator.apply_meal_added(meal))

    def log_from_recipe(
        self, user_id: UUID, recipe_id: UUID, meal_type: MealType
    ) -> LoggedMeal:
        """Log a copy of a recipe's macros as a meal for today."""
        recipe = self.recipe_service.get_recipe(recipe_id, user_id)
        meal = self.repository.create_meal(
            NewMeal(
                user_id=user_id,
                day=self.today(),
                description=recipe.name,
                meal_type=meal_type,
                macros=recipe.macros,
            )
        )
        _logger.info(
            "Meal logged from recipe: meal_id=%s recipe_id=%s", meal.id, recipe_id
        )
        return LoggedMeal(meal=meal, totals=self.aggregator.apply_meal_added(meal))

    def get_day(self, user_id: UUID, day: date | None = None) -> DayLog:
        """Return a day's meals and totals."""
        resolved_day = day or self.today()
        return DayLog(
            day=resolved_day,
            meals=self.repository.list_meals(user_id, resolved_day),
            totals=self.aggregator.get_totals(user_id, resolved_day),
        )

    def get_meal(self, meal_id: UUID, user_id: UUID) -> Meal:
        """Return a meal or raise NotFoundError."""
        meal = self.repository.get_meal(meal_id, user_id)
        if meal is None:
            raise NotFoundError("Meal not found")
        return meal

    def update_meal(self, meal_id: UUID, user_id: UUID, patch: MealPatch) -> Meal:
        """Apply a patch. Macros never change, so totals are left alone."""
        meal = self.repository.update_meal_type(meal_id, user_id, patch.meal_type)
        if meal is None:
            raise NotFoundError("Meal not found")
        return meal

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> DailyTotals:
        """Delete a meal and return the refreshed totals for its day."""
        meal = self.get_meal(meal_id, user_id)
        if not self.repository.delete_meal(meal_id, user_id):
            raise NotFoundError("Meal not found")
        _logger.info("Meal deleted: meal_id=%s user_id=%s", meal_id, user_id)
        return self.aggregator.apply_meal_removed(meal)
