"""Domain models for daily totals."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from macro_tracker.domain.nutrition import MacroProfile


@dataclass(frozen=True)
class DailyTotals:
    """Running macro totals for one user and day.

    Rows read from storage carry ``id`` and ``updated_at``. A day that never had
    a meal has no row; readers synthesize one with :meth:`empty`, which leaves
    both fields unset.
    """

    user_id: UUID
    day: date
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    id: UUID | None = None
    updated_at: datetime | None = None

    @classmethod
    def empty(cls, user_id: UUID, day: date) -> "DailyTotals":
        return cls(
            user_id=user_id,
            day=day,
            calories=0.0,
            protein_g=0.0,
            fat_g=0.0,
            carbs_g=0.0,
        )

    @property
    def macros(self) -> MacroProfile:
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.calories == 0
            and self.protein_g == 0
            and self.fat_g == 0
            and self.carbs_g == 0
        )
