"""Recording of user corrections to AI food analyses."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from nutrition_ai.domain.analysis import CORRECTABLE_FIELDS
from nutrition_ai.domain.corrections import CorrectionRecord
from nutrition_ai.errors import InvalidArgumentError, translate_errors
from nutrition_ai.services.food_logs import FoodLogRepository

_logger = logging.getLogger(__name__)


class CorrectionRepository(Protocol):
    """Persistence interface for the correction audit trail."""

    def create_correction(self, user_id: str, record: CorrectionRecord) -> str:
        """Append a correction record and return its id."""


@dataclass(frozen=True)
class CorrectionOutcome:
    correction_id: str
    food_log_updated: bool


@dataclass
class CorrectionService:
    """Stores corrections for review and patches the corrected food log."""

    correction_repository: CorrectionRepository
    food_log_repository: FoodLogRepository

    def record(
        self,
        user_id: str,
        correction: dict[str, object] | None,
        *,
        food_log_id: str | None = None,
        original_analysis: dict[str, object] | None = None,
    ) -> CorrectionOutcome:
        """Append the audit record, then patch the food log when one is named."""
        if not correction:
            raise InvalidArgumentError("Correction data is required")
        rejected = sorted(set(correction) - CORRECTABLE_FIELDS)
        if rejected:
            raise InvalidArgumentError(
                f"Unsupported correction fields: {', '.join(rejected)}"
            )

        with translate_errors("Failed to save correction"):
            corrected_at = datetime.now(tz=UTC)
            correction_id = self.correction_repository.create_correction(
                user_id,
                CorrectionRecord(
                    food_log_id=food_log_id,
                    original_analysis=original_analysis,
                    correction=correction,
                    corrected_at=corrected_at,
                ),
            )
            if food_log_id:
                self.food_log_repository.apply_correction(
                    user_id, food_log_id, correction, corrected_at
                )
                _logger.info(
                    "Applied correction to food log",
                    extra={"food_log_id": food_log_id, "fields": sorted(correction)},
                )
        return CorrectionOutcome(
            correction_id=correction_id, food_log_updated=bool(food_log_id)
        )
