"""Supabase repository for usage counters."""

from dataclasses import dataclass

from supabase import Client

from nutrition_ai.services.usage import UsageRepository


@dataclass
class SupabaseUsageRepository(UsageRepository):
    """Supabase implementation backed by an atomic increment function."""

    client: Client

    def increment_counter(
        self, user_id: str, counter: str, timestamp_field: str
    ) -> None:
        """Increment the counter in the database in a single statement."""
        self.client.rpc(
            "increment_usage_counter",
            {
                "p_user_id": user_id,
                "p_counter": counter,
                "p_timestamp_field": timestamp_field,
            },
        ).execute()
