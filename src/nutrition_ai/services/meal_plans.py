"""Meal plan generation service."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from nutrition_ai.domain.meal_plans import MealPlan
from nutrition_ai.errors import InvalidArgumentError, translate_errors
from nutrition_ai.services.completions import MEAL_PLAN_SAMPLING, CompletionClient
from nutrition_ai.services.json_extraction import parse_reply

MAX_PLAN_DAYS = 14


class MealPlanRepository(Protocol):
    """Persistence interface for generated meal plans."""

    def create_plan(
        self, user_id: str, plan: dict[str, object], created_at: datetime
    ) -> str:
        """Store a plan owned by the user and return its id."""


@dataclass(frozen=True)
class MealPlanTargets:
    """Daily targets and constraints for a generated plan."""

    calories: float = 2000
    protein: float = 100
    carbs: float = 200
    fat: float = 70
    dietary_restrictions: tuple[str, ...] = ()
    preferences: tuple[str, ...] = ()
    days: int = 7


@dataclass
class MealPlanService:
    """Generates multi-day meal plans and stores them."""

    client: CompletionClient
    model: str
    repository: MealPlanRepository

    async def generate(
        self, user_id: str, targets: MealPlanTargets
    ) -> dict[str, object]:
        """Generate, persist, and return a plan payload with its record id."""
        _validate_targets(targets)
        with translate_errors("Failed to generate meal plan"):
            content = await self.client.complete(
                model=self.model,
                messages=[
                    {"role": "system", "content": _system_prompt(targets.days)},
                    {"role": "user", "content": _user_prompt(targets)},
                ],
                max_tokens=MEAL_PLAN_SAMPLING.max_tokens,
                temperature=MEAL_PLAN_SAMPLING.temperature,
            )
            plan = parse_reply(content, MealPlan).to_payload()
            record = {
                **plan,
                "isActive": True,
                "targetCalories": targets.calories,
                "targetProtein": targets.protein,
                "targetCarbs": targets.carbs,
                "targetFat": targets.fat,
            }
            plan_id = self.repository.create_plan(
                user_id, record, created_at=datetime.now(tz=UTC)
            )
        return {**plan, "id": plan_id}


def _validate_targets(targets: MealPlanTargets) -> None:
    if not 1 <= targets.days <= MAX_PLAN_DAYS:
        raise InvalidArgumentError(
            f"daysCount must be between 1 and {MAX_PLAN_DAYS}"
        )
    for name in ("calories", "protein", "carbs", "fat"):
        if getattr(targets, name) < 0:
            raise InvalidArgumentError(f"Target {name} must not be negative")


def _system_prompt(days: int) -> str:
    return f"""You are an expert nutritionist creating personalized meal plans.

Create a {days}-day meal plan based on the user's requirements.

Return as valid JSON:
{{
  "planName": "Custom {days}-Day Plan",
  "description": "Brief description",
  "days": [
    {{
      "day": 1,
      "dayName": "Monday",
      "meals": [
        {{
          "mealType": "breakfast",
          "name": "Meal name",
          "description": "Brief description",
          "calories": 400,
          "protein": 20,
          "carbs": 45,
          "fat": 15,
          "prepTime": 15,
          "ingredients": ["ingredient1", "ingredient2"],
          "instructions": ["step1", "step2"]
        }}
      ],
      "totalCalories": 2000,
      "totalProtein": 100,
      "totalCarbs": 200,
      "totalFat": 80
    }}
  ],
  "shoppingList": {{
    "proteins": ["item1"],
    "vegetables": ["item2"],
    "grains": ["item3"],
    "dairy": ["item4"],
    "other": ["item5"]
  }},
  "tips": ["Helpful tip 1", "Helpful tip 2"]
}}"""


def _user_prompt(targets: MealPlanTargets) -> str:
    return "\n".join(
        [
            "Create a meal plan with:",
            f"- Daily calories: {targets.calories:g}",
            f"- Protein: {targets.protein:g}g",
            f"- Carbs: {targets.carbs:g}g",
            f"- Fat: {targets.fat:g}g",
            f"- Dietary restrictions: {join_or_none(targets.dietary_restrictions)}",
            f"- Preferences: {join_or_none(targets.preferences)}",
            f"- Days: {targets.days}",
        ]
    )


def join_or_none(values: tuple[str, ...] | list[str]) -> str:
    """Join non-blank values with commas, or return ``None``."""
    cleaned = [value.strip() for value in values if value and value.strip()]
    return ", ".join(cleaned) or "None"
