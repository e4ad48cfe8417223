"""Supabase repository for AI analysis corrections."""

from dataclasses import dataclass

from supabase import Client

from nutrition_ai.domain.corrections import CorrectionRecord
from nutrition_ai.services.corrections import CorrectionRepository


@dataclass
class SupabaseCorrectionRepository(CorrectionRepository):
    """Supabase-backed correction audit trail."""

    client: Client

    def create_correction(self, user_id: str, record: CorrectionRecord) -> str:
        """Insert a correction row and return its id."""
        response = (
            self.client.table("ai_corrections")
            .insert(
                {
                    "user_id": user_id,
                    "food_log_id": record.food_log_id,
                    "original_analysis": record.original_analysis,
                    "correction": record.correction,
                    "status": record.status,
                    "corrected_at": record.corrected_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to record correction")
        return str(response.data[0]["id"])
