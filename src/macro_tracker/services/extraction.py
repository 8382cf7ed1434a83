"""Nutrition extraction from free-text meal descriptions using LLMs."""

import logging
from dataclasses import dataclass
from typing import Protocol

import pydantic

from macro_tracker.domain.nutrition import NutritionEstimate
from macro_tracker.errors import ExtractionError, ValidationError

_logger = logging.getLogger(__name__)

NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": {"type": "number", "minimum": 0},
        "protein_g": {"type": "number", "minimum": 0},
        "fat_g": {"type": "number", "minimum": 0},
        "carbs_g": {"type": "number", "minimum": 0},
    },
    "required": ["calories", "protein_g", "fat_g", "carbs_g"],
    "additionalProperties": False,
}

SYSTEM_PROMPT = (
    "You are a nutrition expert. Estimate the nutritional content of the meal "
    "the user describes. Return calories (kcal) and protein, fat and carbs in "
    "grams for the whole meal. If quantities are given (like '100g'), use them; "
    "otherwise assume a typical portion. For example, '30g whey protein' is "
    "about 110 kcal, 25g protein, 2g carbs and 1g fat."
)


class NutritionExtractorClient(Protocol):
    """Interface for LLM nutrition extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        description: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return structured nutrition data for a meal description."""


@dataclass
class NutritionExtractionService:
    """Service that prompts the extractor and validates its answer."""

    client: NutritionExtractorClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def extract(self, description: str) -> NutritionEstimate:
        """Estimate macros for a meal description.

        Raises ExtractionError when the call fails or the answer does not match
        the schema; callers must not persist anything in that case.
        """
        text = description.strip()
        if not text:
            raise ValidationError("Meal description is required")
        try:
            raw = await self.client.extract(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                instructions=SYSTEM_PROMPT,
                description=text,
                schema=NUTRITION_SCHEMA,
            )
        except Exception as exc:
            _logger.warning("Nutrition extraction call failed: %s", exc)
            raise ExtractionError("Failed to estimate nutrition for meal") from exc
        try:
            return NutritionEstimate.model_validate(raw)
        except pydantic.ValidationError as exc:
            _logger.warning("Nutrition extraction returned invalid data: %s", raw)
            raise ExtractionError(
                "Nutrition estimate was incomplete or malformed"
            ) from exc
