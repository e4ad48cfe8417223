"""Shared test fixtures."""

import json
from collections import Counter
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from nutrition_ai.config import Settings
from nutrition_ai.containers import AppContainer
from nutrition_ai.domain.chat import ChatMessage, StoredProfile
from nutrition_ai.domain.corrections import CorrectionRecord
from nutrition_ai.services.analyzer import FoodAnalyzerService
from nutrition_ai.services.background import OutboundTaskQueue
from nutrition_ai.services.chat import ChatService, ChatSessionRepository
from nutrition_ai.services.completions import CompletionClient
from nutrition_ai.services.corrections import CorrectionRepository, CorrectionService
from nutrition_ai.services.food_logs import FoodLogRepository
from nutrition_ai.services.identity import IdentityVerifier
from nutrition_ai.services.meal_plans import MealPlanRepository, MealPlanService
from nutrition_ai.services.profiles import ProfileRepository
from nutrition_ai.services.recipes import RecipeService
from nutrition_ai.services.summary import DailySummaryService
from nutrition_ai.services.usage import UsageRepository, UsageService

USER_ID = "user-1"
TOKEN = "valid-token"

ANALYSIS_PAYLOAD: dict[str, object] = {
    "foodName": "Grilled chicken salad",
    "description": "Mixed greens with grilled chicken",
    "servingSize": "1 bowl",
    "servingSizeGrams": 300,
    "calories": 420,
    "protein": 35,
    "carbohydrates": 20,
    "fat": 18,
    "fiber": 6,
    "sugar": 5,
    "sodium": 600,
    "glycemicIndex": 30,
    "ingredients": ["chicken", "lettuce", "olive oil"],
    "healthScore": 8.5,
    "healthNotes": "High protein, balanced meal",
    "warnings": [],
    "confidence": 0.9,
}

MEAL_PLAN_PAYLOAD: dict[str, object] = {
    "planName": "Custom 1-Day Plan",
    "description": "Balanced plan",
    "days": [
        {
            "day": 1,
            "dayName": "Monday",
            "meals": [
                {
                    "mealType": "breakfast",
                    "name": "Oatmeal",
                    "calories": 400,
                    "protein": 15,
                    "carbs": 60,
                    "fat": 10,
                    "ingredients": ["oats", "milk"],
                    "instructions": ["Cook oats"],
                }
            ],
            "totalCalories": 2000,
            "totalProtein": 100,
            "totalCarbs": 200,
            "totalFat": 70,
        }
    ],
    "shoppingList": {"grains": ["oats"], "dairy": ["milk"]},
    "tips": ["Drink water"],
}

RECIPE_PAYLOAD: dict[str, object] = {
    "name": "Lemon herb salmon",
    "description": "Baked salmon with herbs",
    "cuisine": "Mediterranean",
    "difficulty": "easy",
    "prepTime": 10,
    "cookTime": 20,
    "totalTime": 30,
    "servings": 4,
    "caloriesPerServing": 380,
    "nutritionPerServing": {"calories": 380, "protein": 34, "carbs": 4, "fat": 24},
    "ingredients": [{"item": "salmon fillet", "amount": "600 g"}],
    "instructions": [{"step": 1, "instruction": "Bake at 200C", "duration": 20}],
    "substitutions": [{"original": "lemon", "substitute": "lime"}],
    "storage": "Refrigerate up to 2 days",
    "tags": ["high-protein"],
}


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning queued replies and recording calls."""

    replies: list[str | None] = field(default_factory=list)
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "messages": messages,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        if not self.replies:
            return None
        return self.replies.pop(0)

    def reply_with_json(self, payload: dict[str, object], prose: str = "") -> None:
        self.replies.append(f"{prose}{json.dumps(payload)}")


@dataclass
class FakeIdentityVerifier(IdentityVerifier):
    """Identity verifier backed by a token map."""

    tokens: dict[str, str] = field(default_factory=lambda: {TOKEN: USER_ID})

    def verify(self, token: str) -> str | None:
        return self.tokens.get(token)


@dataclass
class InMemoryUsageRepository(UsageRepository):
    """In-memory usage counters for tests."""

    counters: Counter[tuple[str, str]] = field(default_factory=Counter)
    stamps: dict[tuple[str, str], datetime] = field(default_factory=dict)
    fail: bool = False

    def increment_counter(
        self, user_id: str, counter: str, timestamp_field: str
    ) -> None:
        if self.fail:
            raise RuntimeError("store unavailable")
        self.counters[(user_id, counter)] += 1
        self.stamps[(user_id, timestamp_field)] = datetime.now(tz=UTC)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: dict[str, dict[str, object]] = field(default_factory=dict)

    def create_plan(
        self, user_id: str, plan: dict[str, object], created_at: datetime
    ) -> str:
        plan_id = str(uuid4())
        self.plans[plan_id] = {"user_id": user_id, "createdAt": created_at, **plan}
        return plan_id


@dataclass
class InMemoryChatSessionRepository(ChatSessionRepository):
    """In-memory chat session repository for tests."""

    sessions: dict[tuple[str, str], datetime] = field(default_factory=dict)
    messages: dict[tuple[str, str], list[ChatMessage]] = field(default_factory=dict)

    def touch_session(
        self, user_id: str, session_id: str, updated_at: datetime
    ) -> None:
        self.sessions[(user_id, session_id)] = updated_at

    def append_messages(
        self, user_id: str, session_id: str, messages: list[ChatMessage]
    ) -> None:
        self.messages.setdefault((user_id, session_id), []).extend(messages)


@dataclass
class InMemoryCorrectionRepository(CorrectionRepository):
    """In-memory correction audit trail for tests."""

    records: list[tuple[str, CorrectionRecord]] = field(default_factory=list)

    def create_correction(self, user_id: str, record: CorrectionRecord) -> str:
        self.records.append((user_id, record))
        return f"correction-{len(self.records)}"


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food logs keyed by owner and log id."""

    logs: dict[str, dict[str, dict[str, object]]] = field(default_factory=dict)

    def add(self, user_id: str, logged_at: datetime, **fields: object) -> str:
        log_id = str(uuid4())
        self.logs.setdefault(user_id, {})[log_id] = {"loggedAt": logged_at, **fields}
        return log_id

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[dict[str, object]]:
        return [
            {"id": log_id, **log}
            for log_id, log in self.logs.get(user_id, {}).items()
            if start <= log["loggedAt"] <= end
        ]

    def apply_correction(
        self,
        user_id: str,
        food_log_id: str,
        fields: dict[str, object],
        corrected_at: datetime,
    ) -> None:
        owned = self.logs.get(user_id, {})
        if food_log_id not in owned:
            raise LookupError(f"Food log {food_log_id} not found")
        owned[food_log_id].update(fields)
        owned[food_log_id]["wasUserCorrected"] = True
        owned[food_log_id]["correctedAt"] = corrected_at


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, StoredProfile] = field(default_factory=dict)

    def get_profile(self, user_id: str) -> StoredProfile | None:
        return self.profiles.get(user_id)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="eyJhbGciOiJIUzI1NiJ9.eyJyb2xlIjoic2VydmljZSJ9.c2ln",
        openai_api_key="openai-key",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def queue() -> OutboundTaskQueue:
    return OutboundTaskQueue(retry_attempts=1, retry_delay_seconds=0)


@pytest.fixture
def usage_repository() -> InMemoryUsageRepository:
    return InMemoryUsageRepository()


@pytest.fixture
def usage_service(
    usage_repository: InMemoryUsageRepository, queue: OutboundTaskQueue
) -> UsageService:
    return UsageService(usage_repository, queue)


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    completion_client: FakeCompletionClient,
    queue: OutboundTaskQueue,
    usage_service: UsageService,
    food_log_repository: InMemoryFoodLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    model = settings.openai_model

    async def close_resources() -> None:
        await queue.drain()

    return AppContainer(
        settings=settings,
        identity_verifier=FakeIdentityVerifier(),
        queue=queue,
        analyzer_service=FoodAnalyzerService(
            client=completion_client, model=model, usage_service=usage_service
        ),
        meal_plan_service=MealPlanService(
            client=completion_client,
            model=model,
            repository=InMemoryMealPlanRepository(),
        ),
        recipe_service=RecipeService(client=completion_client, model=model),
        chat_service=ChatService(
            client=completion_client,
            model=model,
            profile_repository=profile_repository,
            session_repository=InMemoryChatSessionRepository(),
            usage_service=usage_service,
            queue=queue,
        ),
        correction_service=CorrectionService(
            correction_repository=InMemoryCorrectionRepository(),
            food_log_repository=food_log_repository,
        ),
        summary_service=DailySummaryService(
            food_log_repository=food_log_repository,
            profile_repository=profile_repository,
            timezone=UTC,
        ),
        close_resources=close_resources,
    )
