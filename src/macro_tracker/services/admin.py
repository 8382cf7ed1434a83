"""Admin service for repairing aggregate drift."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from macro_tracker.domain.totals import DailyTotals
from macro_tracker.errors import ValidationError
from macro_tracker.services.history import MAX_WINDOW_DAYS, HistoryReader
from macro_tracker.services.totals import TotalsAggregator

_logger = logging.getLogger(__name__)


@dataclass
class AdminService:
    """Service for operator-triggered totals recomputation."""

    aggregator: TotalsAggregator
    history_reader: HistoryReader

    def recompute_day(self, user_id: UUID, day: date) -> DailyTotals:
        """Reset one day's totals to the sum of its meals."""
        before = self.aggregator.get_totals(user_id, day)
        after = self.aggregator.recompute_totals(user_id, day)
        if before.macros != after.macros:
            _logger.warning(
                "Totals drift repaired: user_id=%s day=%s before=%s after=%s",
                user_id,
                day,
                before.calories,
                after.calories,
            )
        return after

    def rebuild_window(self, user_id: UUID, window_days: int) -> list[DailyTotals]:
        """Recompute every day of the trailing window, newest first."""
        if window_days < 1 or window_days > MAX_WINDOW_DAYS:
            raise ValidationError(
                f"Window must be between 1 and {MAX_WINDOW_DAYS} days"
            )
        end = self.history_reader.today()
        return [
            self.recompute_day(user_id, end - timedelta(days=offset))
            for offset in range(window_days)
        ]
