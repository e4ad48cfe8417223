"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_ai.services.food_logs import FoodLogRepository


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs stored as JSON entries."""

    client: Client

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[dict[str, object]]:
        """Return food logs in the inclusive time range."""
        response = (
            self.client.table("food_logs")
            .select("id, logged_at, entry, was_user_corrected, corrected_at")
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_flatten_row(row) for row in response.data or []]

    def apply_correction(
        self,
        user_id: str,
        food_log_id: str,
        fields: dict[str, object],
        corrected_at: datetime,
    ) -> None:
        """Merge corrected fields into the stored entry in a single statement.

        The ``apply_food_log_correction`` function computes ``entry || patch`` for
        the row matching both ids and returns the patched id, or nothing when
        the caller owns no such log.
        """
        response = self.client.rpc(
            "apply_food_log_correction",
            {
                "p_food_log_id": food_log_id,
                "p_user_id": user_id,
                "p_patch": fields,
                "p_corrected_at": corrected_at.isoformat(),
            },
        ).execute()
        if not response.data:
            raise LookupError(f"Food log {food_log_id} not found")


def _flatten_row(row: dict[str, object]) -> dict[str, object]:
    entry = row.get("entry")
    flattened: dict[str, object] = dict(entry) if isinstance(entry, dict) else {}
    flattened["id"] = str(row["id"])
    flattened["loggedAt"] = row.get("logged_at")
    if row.get("was_user_corrected"):
        flattened["wasUserCorrected"] = True
        flattened["correctedAt"] = row.get("corrected_at")
    return flattened
