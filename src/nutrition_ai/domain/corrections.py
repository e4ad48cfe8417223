"""Domain models for user corrections of AI analyses."""

from dataclasses import dataclass
from datetime import datetime

PENDING = "pending"


@dataclass(frozen=True)
class CorrectionRecord:
    """Audit entry for a user-submitted correction."""

    food_log_id: str | None
    original_analysis: dict[str, object] | None
    correction: dict[str, object]
    corrected_at: datetime
    status: str = PENDING
