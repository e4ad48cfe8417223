"""Models for the conversational assistant."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    """One prior message in the conversation history."""

    role: Literal["user", "assistant"]
    content: str


class MacroTargets(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    protein_grams: float | None = Field(default=None, alias="proteinGrams")
    carbs_grams: float | None = Field(default=None, alias="carbsGrams")
    fat_grams: float | None = Field(default=None, alias="fatGrams")
    fiber_grams: float | None = Field(default=None, alias="fiberGrams")


class UserProfileSnapshot(BaseModel):
    """Profile snapshot sent inline by the client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    age: int | None = None
    gender: str | None = None
    country: str | None = None
    height_cm: float | None = Field(default=None, alias="heightCm")
    weight_kg: float | None = Field(default=None, alias="weightKg")
    bmi: float | None = None
    activity_level: str | None = Field(default=None, alias="activityLevel")
    goal: str | None = None
    daily_calorie_target: float | None = Field(
        default=None, alias="dailyCalorieTarget"
    )
    macro_targets: MacroTargets | None = Field(default=None, alias="macroTargets")
    health_conditions: list[str] = Field(
        default_factory=list, alias="healthConditions"
    )
    dietary_preferences: list[str] = Field(
        default_factory=list, alias="dietaryPreferences"
    )
    sodium_limit_mg: float | None = Field(default=None, alias="sodiumLimitMg")
    gi_limit: float | None = Field(default=None, alias="giLimit")


@dataclass(frozen=True)
class StoredProfile:
    """Profile fields persisted by the profile-management flow."""

    name: str | None = None
    goal: str | None = None
    activity_level: str | None = None
    health_conditions: tuple[str, ...] = ()
    dietary_preferences: tuple[str, ...] = ()
    daily_calorie_target: float | None = None
    daily_protein_target: float | None = None
    daily_carbs_target: float | None = None
    daily_fat_target: float | None = None


@dataclass(frozen=True)
class ChatMessage:
    """A message appended to a chat session."""

    role: str
    content: str
    timestamp: datetime
