"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.openai_nutrition_client import OpenAINutritionClient
from macro_tracker.adapters.supabase_daily_totals_repository import (
    SupabaseDailyTotalsRepository,
)
from macro_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from macro_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from macro_tracker.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.admin import AdminService
from macro_tracker.services.extraction import NutritionExtractionService
from macro_tracker.services.history import HistoryReader
from macro_tracker.services.meals import MealService
from macro_tracker.services.recipes import RecipeService
from macro_tracker.services.totals import TotalsAggregator
from macro_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    extraction_service: NutritionExtractionService
    aggregator: TotalsAggregator
    meal_service: MealService
    recipe_service: RecipeService
    history_reader: HistoryReader
    admin_service: AdminService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    totals_repository = SupabaseDailyTotalsRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    user_service = UserService(SupabaseIdentityProvider(supabase_client))
    openai_client = OpenAINutritionClient.create(resolved_settings.openai_api_key)
    extraction_service = NutritionExtractionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    aggregator = TotalsAggregator(
        repository=totals_repository,
        strategy=resolved_settings.totals_strategy,
    )
    recipe_service = RecipeService(
        repository=recipe_repository,
        meal_repository=meal_repository,
    )
    meal_service = MealService(
        extraction_service=extraction_service,
        recipe_service=recipe_service,
        repository=meal_repository,
        aggregator=aggregator,
        timezone=resolved_settings.timezone,
    )
    history_reader = HistoryReader(
        repository=totals_repository,
        timezone=resolved_settings.timezone,
        default_window_days=resolved_settings.history_window_days,
    )
    admin_service = AdminService(aggregator=aggregator, history_reader=history_reader)

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        extraction_service=extraction_service,
        aggregator=aggregator,
        meal_service=meal_service,
        recipe_service=recipe_service,
        history_reader=history_reader,
        admin_service=admin_service,
        close_resources=close_resources,
    )
