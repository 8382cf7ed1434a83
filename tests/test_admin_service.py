"""Tests for admin totals repair."""

import asyncio
import logging
from datetime import timedelta

import pytest

from macro_tracker.domain.meals import MealType
from macro_tracker.domain.nutrition import MacroProfile
from macro_tracker.errors import ValidationError
from macro_tracker.services.admin import AdminService
from macro_tracker.services.history import HistoryReader
from tests.conftest import USER_A, build_services


@pytest.fixture(autouse=True)
def _propagate_app_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging.getLogger("macro_tracker"), "propagate", True)


def _admin():  # type: ignore[no-untyped-def]
    meal_service, _, totals_repository = build_services()
    admin_service = AdminService(
        aggregator=meal_service.aggregator,
        history_reader=HistoryReader(repository=totals_repository),
    )
    return meal_service, admin_service, totals_repository


def test_recompute_day_repairs_drift(caplog: pytest.LogCaptureFixture) -> None:
    meal_service, admin_service, totals_repository = _admin()
    logged = asyncio.run(meal_service.log_from_text(USER_A.id, "stew", MealType.DINNER))
    day = logged.meal.day
    totals_repository.set_row(USER_A.id, day, MacroProfile(999, 1, 1, 1))

    with caplog.at_level("WARNING", logger="macro_tracker"):
        totals = admin_service.recompute_day(USER_A.id, day)

    assert totals.calories == 100
    assert totals.protein_g == 10
    assert "drift repaired" in caplog.text


def test_recompute_day_without_drift_is_quiet(caplog: pytest.LogCaptureFixture) -> None:
    meal_service, admin_service, _ = _admin()
    logged = asyncio.run(meal_service.log_from_text(USER_A.id, "stew", MealType.DINNER))

    with caplog.at_level("WARNING", logger="macro_tracker"):
        admin_service.recompute_day(USER_A.id, logged.meal.day)

    assert "drift repaired" not in caplog.text


def test_rebuild_window_recomputes_each_day_newest_first() -> None:
    meal_service, admin_service, totals_repository = _admin()
    today = admin_service.history_reader.today()
    asyncio.run(meal_service.log_from_text(USER_A.id, "eggs", MealType.BREAKFAST))
    totals_repository.set_row(
        USER_A.id, today - timedelta(days=1), MacroProfile(50, 5, 5, 5)
    )

    rebuilt = admin_service.rebuild_window(USER_A.id, 3)

    assert [entry.day for entry in rebuilt] == [
        today - timedelta(days=offset) for offset in range(3)
    ]
    assert [entry.calories for entry in rebuilt] == [100, 0, 0]
    assert totals_repository.get_totals(USER_A.id, today - timedelta(days=1)).is_empty


@pytest.mark.parametrize("days", [0, 400])
def test_rebuild_window_validates_range(days: int) -> None:
    _, admin_service, _ = _admin()

    with pytest.raises(ValidationError):
        admin_service.rebuild_window(USER_A.id, days)
