"""Read-only history over stored daily totals."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.domain.totals import DailyTotals
from macro_tracker.errors import ValidationError
from macro_tracker.services.totals import DailyTotalsRepository

MAX_WINDOW_DAYS = 366


@dataclass
class WindowSummary:
    """Totals for every day of a window, with per-day averages."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein_g: float
    avg_fat_g: float
    avg_carbs_g: float


@dataclass
class HistoryReader:
    """Projection over daily totals for a trailing window of days."""

    repository: DailyTotalsRepository
    timezone: str = "UTC"
    default_window_days: int = 7

    def list_recent_totals(
        self, user_id: UUID, window_days: int | None = None
    ) -> list[DailyTotals]:
        """Return stored totals for the window, most recent day first.

        Days without a totals row are omitted; callers read them as zero.
        """
        start, end = self._window(window_days)
        return self.repository.list_totals(user_id, start, end)

    def summarize_window(
        self, user_id: UUID, window_days: int | None = None
    ) -> WindowSummary:
        """Return one entry per day in the window, missing days as zero."""
        start, end = self._window(window_days)
        stored = {
            totals.day: totals
            for totals in self.repository.list_totals(user_id, start, end)
        }
        days = (end - start).days + 1
        daily = []
        for offset in range(days):
            day = end - timedelta(days=offset)
            daily.append(stored.get(day) or DailyTotals.empty(user_id, day))
        total = MacroProfile.total(entry.macros for entry in daily)

        return WindowSummary(
            daily=daily,
            avg_calories=total.calories / days,
            avg_protein_g=total.protein_g / days,
            avg_fat_g=total.fat_g / days,
            avg_carbs_g=total.carbs_g / days,
        )

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone)).date()

    def _window(self, window_days: int | None) -> tuple[date, date]:
        days = self.default_window_days if window_days is None else window_days
        if days < 1 or days > MAX_WINDOW_DAYS:
            raise ValidationError(
                f"Window must be between 1 and {MAX_WINDOW_DAYS} days"
            )
        end = self.today()
        return end - timedelta(days=days - 1), end
