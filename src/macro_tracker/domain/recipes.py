"""Domain models for saved recipes."""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from macro_tracker.domain.nutrition import MacroProfile

_CENTS = Decimal("0.01")
MAX_NAME_LENGTH = 255


def quantize_macro(value: Decimal | float | int | str) -> Decimal:
    """Return a macro value with two fractional digits."""
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def normalize_recipe_name(value: str) -> str:
    """Strip a recipe name, rejecting blank ones."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Recipe name is required")
    return stripped


@dataclass(frozen=True)
class Recipe:
    """Reusable named macro template."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    calories: Decimal
    protein_g: Decimal
    fat_g: Decimal
    carbs_g: Decimal
    created_at: datetime
    updated_at: datetime

    @property
    def macros(self) -> MacroProfile:
        """Float snapshot of the recipe macros, as copied into a meal."""
        return MacroProfile(
            calories=float(self.calories),
            protein_g=float(self.protein_g),
            fat_g=float(self.fat_g),
            carbs_g=float(self.carbs_g),
        )


class RecipeDraft(BaseModel):
    """Values for a new recipe."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    description: str = ""
    calories: Decimal = Field(ge=0)
    protein_g: Decimal = Field(ge=0)
    fat_g: Decimal = Field(ge=0)
    carbs_g: Decimal = Field(ge=0)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return normalize_recipe_name(value)

    @field_validator("calories", "protein_g", "fat_g", "carbs_g")
    @classmethod
    def _two_digits(cls, value: Decimal) -> Decimal:
        return quantize_macro(value)


class RecipePatch(BaseModel):
    """Fields of a recipe that may change after creation."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return normalize_recipe_name(value)
