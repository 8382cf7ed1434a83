"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.domain.totals import DailyTotals


class MealType(StrEnum):
    """Slot of the day a meal belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class NewMeal:
    """Meal values ready to be persisted."""

    user_id: UUID
    day: date
    description: str
    meal_type: MealType
    macros: MacroProfile


@dataclass(frozen=True)
class Meal:
    """A logged meal."""

    id: UUID
    user_id: UUID
    day: date
    description: str
    meal_type: MealType
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    created_at: datetime

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )


@dataclass(frozen=True)
class LoggedMeal:
    """A newly logged meal together with the refreshed day totals."""

    meal: Meal
    totals: DailyTotals


@dataclass(frozen=True)
class DayLog:
    """All meals of a day, newest first, with the day totals."""

    day: date
    meals: list[Meal]
    totals: DailyTotals


class MealPatch(BaseModel):
    """Fields of a meal that may change after logging."""

    model_config = ConfigDict(extra="forbid")

    meal_type: MealType
