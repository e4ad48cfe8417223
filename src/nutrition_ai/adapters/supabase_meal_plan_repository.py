"""Supabase repository for meal plans."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_ai.services.meal_plans import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for generated meal plans."""

    client: Client

    def create_plan(
        self, user_id: str, plan: dict[str, object], created_at: datetime
    ) -> str:
        """Insert a plan row and return its id."""
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "user_id": user_id,
                    "plan": plan,
                    "is_active": bool(plan.get("isActive", True)),
                    "target_calories": plan.get("targetCalories"),
                    "target_protein": plan.get("targetProtein"),
                    "target_carbs": plan.get("targetCarbs"),
                    "target_fat": plan.get("targetFat"),
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        return str(response.data[0]["id"])
