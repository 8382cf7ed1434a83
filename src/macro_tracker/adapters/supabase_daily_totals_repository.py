"""Supabase repository for daily totals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.domain.totals import DailyTotals
from macro_tracker.errors import StorageError
from macro_tracker.services.totals import DailyTotalsRepository

_TOTALS_COLUMNS = (
    "id, user_id, day, total_calories, total_protein_g, total_fat_g, "
    "total_carbs_g, updated_at"
)


@dataclass
class SupabaseDailyTotalsRepository(DailyTotalsRepository):
    """Supabase implementation for daily totals.

    Writes go through the ``increment_daily_totals`` and
    ``recompute_daily_totals`` database functions, each a single upsert on the
    ``(user_id, day)`` unique key.
    """

    client: Client

    def get_totals(self, user_id: UUID, day: date) -> DailyTotals | None:
        """Return the totals row for a user and day."""
        response = (
            self.client.table("daily_totals")
            .select(_TOTALS_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_totals(response.data[0])

    def list_totals(self, user_id: UUID, start: date, end: date) -> list[DailyTotals]:
        """Return totals rows in the inclusive day range, newest first."""
        response = (
            self.client.table("daily_totals")
            .select(_TOTALS_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=True)
            .execute()
        )
        return [_parse_totals(row) for row in response.data or []]

    def increment(self, user_id: UUID, day: date, delta: MacroProfile) -> DailyTotals:
        """Atomically add delta to the totals row."""
        response = self.client.rpc(
            "increment_daily_totals",
            {
                "p_user_id": str(user_id),
                "p_day": day.isoformat(),
                "p_calories": delta.calories,
                "p_protein_g": delta.protein_g,
                "p_fat_g": delta.fat_g,
                "p_carbs_g": delta.carbs_g,
            },
        ).execute()
        return _single_row(response.data, "increment")

    def recompute(self, user_id: UUID, day: date) -> DailyTotals:
        """Atomically reset the totals row to the sum of the day's meals."""
        response = self.client.rpc(
            "recompute_daily_totals",
            {"p_user_id": str(user_id), "p_day": day.isoformat()},
        ).execute()
        return _single_row(response.data, "recompute")


def _single_row(data: object, action: str) -> DailyTotals:
    if isinstance(data, dict):
        return _parse_totals(data)
    if isinstance(data, list) and data:
        return _parse_totals(data[0])
    raise StorageError(f"Failed to {action} daily totals")


def _parse_totals(row: dict[str, object]) -> DailyTotals:
    updated_raw = row.get("updated_at")
    updated_at = (
        datetime.fromisoformat(updated_raw)
        if isinstance(updated_raw, str) and updated_raw
        else None
    )
    return DailyTotals(
        id=UUID(str(row["id"])) if row.get("id") else None,
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["day"])),
        calories=float(row.get("total_calories", 0.0)),
        protein_g=float(row.get("total_protein_g", 0.0)),
        fat_g=float(row.get("total_fat_g", 0.0)),
        carbs_g=float(row.get("total_carbs_g", 0.0)),
        updated_at=updated_at,
    )
