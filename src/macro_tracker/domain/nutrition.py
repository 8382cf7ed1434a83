"""Nutrition domain models."""

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a meal or a day."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    def __add__(self, other: "MacroProfile") -> "MacroProfile":
        return MacroProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            carbs_g=self.carbs_g + other.carbs_g,
        )

    @classmethod
    def total(cls, values: Iterable["MacroProfile"]) -> "MacroProfile":
        """Sum profiles, starting from zero."""
        result = cls(0.0, 0.0, 0.0, 0.0)
        for value in values:
            result = result + value
        return result

    def __neg__(self) -> "MacroProfile":
        return MacroProfile(
            calories=-self.calories,
            protein_g=-self.protein_g,
            fat_g=-self.fat_g,
            carbs_g=-self.carbs_g,
        )


class NutritionEstimate(BaseModel):
    """Structured output of the nutrition extractor."""

    calories: float = Field(ge=0.0)
    protein_g: float = Field(ge=0.0)
    fat_g: float = Field(ge=0.0)
    carbs_g: float = Field(ge=0.0)

    def to_macros(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )
