"""Supabase repository for user profiles."""

from dataclasses import dataclass

from supabase import Client

from nutrition_ai.domain.chat import StoredProfile
from nutrition_ai.services.profiles import ProfileRepository

_COLUMNS = (
    "name, goal, activity_level, health_conditions, dietary_preferences, "
    "daily_calorie_target, daily_protein_target, daily_carbs_target, "
    "daily_fat_target"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for reading profiles."""

    client: Client

    def get_profile(self, user_id: str) -> StoredProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return StoredProfile(
            name=row.get("name"),
            goal=row.get("goal"),
            activity_level=row.get("activity_level"),
            health_conditions=tuple(row.get("health_conditions") or ()),
            dietary_preferences=tuple(row.get("dietary_preferences") or ()),
            daily_calorie_target=_optional_float(row.get("daily_calorie_target")),
            daily_protein_target=_optional_float(row.get("daily_protein_target")),
            daily_carbs_target=_optional_float(row.get("daily_carbs_target")),
            daily_fat_target=_optional_float(row.get("daily_fat_target")),
        )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
