"""Request bodies accepted by the callable endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from nutrition_ai.domain.chat import ChatTurn, UserProfileSnapshot
from nutrition_ai.services.chat import HISTORY_LIMIT


class CallableRequest(BaseModel):
    """Base body model: camelCase on the wire, snake_case accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class AnalyzeFoodRequest(CallableRequest):
    image_base64: str | None = None
    mime_type: str | None = None
    user_context: str | None = None


class GenerateMealPlanRequest(CallableRequest):
    target_calories: float | None = None
    target_protein: float | None = None
    target_carbs: float | None = None
    target_fat: float | None = None
    dietary_restrictions: list[str] = Field(default_factory=list)
    preferences: list[str] = Field(default_factory=list)
    days_count: int | None = None


class GenerateRecipeRequest(CallableRequest):
    recipe_name: str | None = None
    target_calories: float | None = None
    dietary_restrictions: list[str] = Field(default_factory=list)
    servings: int | None = None
    cuisine: str | None = None
    difficulty: str | None = None


class ChatRequest(CallableRequest):
    message: str | None = None
    conversation_history: list[ChatTurn] = Field(default_factory=list)
    session_id: str | None = None
    user_profile: UserProfileSnapshot | None = None

    @field_validator("conversation_history", mode="before")
    @classmethod
    def _recent_history(cls, value: Any) -> Any:
        """Keep only the turns that are forwarded; older ones are never read."""
        if isinstance(value, list):
            return value[-HISTORY_LIMIT:]
        return value


class CorrectFoodAnalysisRequest(CallableRequest):
    food_log_id: str | None = None
    correction: dict[str, Any] | None = None
    original_analysis: dict[str, Any] | None = None


class DailySummaryRequest(CallableRequest):
    date: str | None = None
