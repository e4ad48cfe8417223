"""Access to logged food entries."""

from datetime import datetime
from typing import Protocol


class FoodLogRepository(Protocol):
    """Persistence interface for logged food entries."""

    def list_food_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[dict[str, object]]:
        """Return the user's food logs with ``start <= loggedAt <= end``."""

    def apply_correction(
        self,
        user_id: str,
        food_log_id: str,
        fields: dict[str, object],
        corrected_at: datetime,
    ) -> None:
        """Overlay fields on a food log and mark it as user-corrected."""
