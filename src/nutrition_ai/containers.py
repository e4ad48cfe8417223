"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from supabase import create_client

from nutrition_ai.adapters.openai_completion_client import OpenAICompletionClient
from nutrition_ai.adapters.supabase_chat_session_repository import (
    SupabaseChatSessionRepository,
)
from nutrition_ai.adapters.supabase_correction_repository import (
    SupabaseCorrectionRepository,
)
from nutrition_ai.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrition_ai.adapters.supabase_identity_verifier import SupabaseIdentityVerifier
from nutrition_ai.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from nutrition_ai.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_ai.adapters.supabase_usage_repository import SupabaseUsageRepository
from nutrition_ai.config import Settings
from nutrition_ai.services.analyzer import FoodAnalyzerService
from nutrition_ai.services.background import OutboundTaskQueue
from nutrition_ai.services.chat import ChatService
from nutrition_ai.services.corrections import CorrectionService
from nutrition_ai.services.identity import IdentityVerifier
from nutrition_ai.services.meal_plans import MealPlanService
from nutrition_ai.services.recipes import RecipeService
from nutrition_ai.services.summary import DailySummaryService
from nutrition_ai.services.usage import UsageService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_verifier: IdentityVerifier
    queue: OutboundTaskQueue
    analyzer_service: FoodAnalyzerService
    meal_plan_service: MealPlanService
    recipe_service: RecipeService
    chat_service: ChatService
    correction_service: CorrectionService
    summary_service: DailySummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    identity_verifier = SupabaseIdentityVerifier(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    queue = OutboundTaskQueue(
        retry_attempts=resolved_settings.background_retry_attempts,
        retry_delay_seconds=resolved_settings.background_retry_delay_seconds,
    )
    usage_service = UsageService(SupabaseUsageRepository(supabase_client), queue)
    completion_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
        max_retries=resolved_settings.openai_max_retries,
    )
    model = resolved_settings.openai_model
    analyzer_service = FoodAnalyzerService(
        client=completion_client, model=model, usage_service=usage_service
    )
    meal_plan_service = MealPlanService(
        client=completion_client,
        model=model,
        repository=SupabaseMealPlanRepository(supabase_client),
    )
    recipe_service = RecipeService(client=completion_client, model=model)
    chat_service = ChatService(
        client=completion_client,
        model=model,
        profile_repository=profile_repository,
        session_repository=SupabaseChatSessionRepository(supabase_client),
        usage_service=usage_service,
        queue=queue,
    )
    correction_service = CorrectionService(
        correction_repository=SupabaseCorrectionRepository(supabase_client),
        food_log_repository=food_log_repository,
    )
    summary_service = DailySummaryService(
        food_log_repository=food_log_repository,
        profile_repository=profile_repository,
        timezone=(
            ZoneInfo(resolved_settings.summary_timezone)
            if resolved_settings.summary_timezone
            else None
        ),
    )

    async def close_resources() -> None:
        await queue.drain()
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_verifier=identity_verifier,
        queue=queue,
        analyzer_service=analyzer_service,
        meal_plan_service=meal_plan_service,
        recipe_service=recipe_service,
        chat_service=chat_service,
        correction_service=correction_service,
        summary_service=summary_service,
        close_resources=close_resources,
    )
