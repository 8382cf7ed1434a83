"""Daily totals aggregation tied to the meal lifecycle."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.config import TotalsStrategy
from macro_tracker.domain.meals import Meal
from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.domain.totals import DailyTotals

_logger = logging.getLogger(__name__)


class DailyTotalsRepository(Protocol):
    """Persistence interface for daily totals.

    ``increment`` and ``recompute`` must each be a single atomic write on the
    storage side, so concurrent requests for the same key cannot lose updates.
    """

    def get_totals(self, user_id: UUID, day: date) -> DailyTotals | None:
        """Return the totals row for a user and day, if present."""

    def list_totals(self, user_id: UUID, start: date, end: date) -> list[DailyTotals]:
        """Return totals rows with start <= day <= end, newest day first."""

    def increment(self, user_id: UUID, day: date, delta: MacroProfile) -> DailyTotals:
        """Add delta to the row for the key, creating it when absent."""

    def recompute(self, user_id: UUID, day: date) -> DailyTotals:
        """Set the row for the key to the sum over its current meals."""


@dataclass
class TotalsAggregator:
    """Keeps each daily totals row equal to the sum of that day's meals.

    One strategy is applied to every lifecycle event. ``recompute`` re-sums the
    day under a storage-side lock; ``increment`` applies the meal's macros as a
    signed delta in a single additive upsert.
    """

    repository: DailyTotalsRepository
    strategy: TotalsStrategy = "recompute"

    def apply_meal_added(self, meal: Meal) -> DailyTotals:
        """Fold a persisted meal into its day totals."""
        if self.strategy == "increment":
            totals = self.repository.increment(meal.user_id, meal.day, meal.macros)
        else:
            totals = self.repository.recompute(meal.user_id, meal.day)
        _logger.debug(
            "Totals updated after add: user_id=%s day=%s calories=%s",
            meal.user_id,
            meal.day,
            totals.calories,
        )
        return totals

    def apply_meal_removed(self, meal: Meal) -> DailyTotals:
        """Remove a deleted meal's contribution from its day totals."""
        if self.strategy == "increment":
            totals = self.repository.increment(meal.user_id, meal.day, -meal.macros)
        else:
            totals = self.repository.recompute(meal.user_id, meal.day)
        _logger.debug(
            "Totals updated after delete: user_id=%s day=%s calories=%s",
            meal.user_id,
            meal.day,
            totals.calories,
        )
        return totals

    def recompute_totals(self, user_id: UUID, day: date) -> DailyTotals:
        """Reset the totals for a day to the exact sum of its meals."""
        return self.repository.recompute(user_id, day)

    def get_totals(self, user_id: UUID, day: date) -> DailyTotals:
        """Return the stored totals, or an all-zero row for an empty day."""
        return self.repository.get_totals(user_id, day) or DailyTotals.empty(
            user_id, day
        )
