"""Per-user usage counters."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_ai.services.background import OutboundTaskQueue

SCAN_COUNTER = "totalScans"
SCAN_TIMESTAMP = "lastScanAt"
CHAT_COUNTER = "totalChatMessages"
CHAT_TIMESTAMP = "lastChatAt"


class UsageRepository(Protocol):
    """Persistence interface for usage counters."""

    def increment_counter(
        self, user_id: str, counter: str, timestamp_field: str
    ) -> None:
        """Atomically add one to a counter and stamp the event time."""


@dataclass
class UsageService:
    """Records usage events as fire-and-forget increments."""

    repository: UsageRepository
    queue: OutboundTaskQueue

    def record_scan(self, user_id: str) -> None:
        """Count one food analysis."""
        self._increment(user_id, SCAN_COUNTER, SCAN_TIMESTAMP)

    def record_chat_message(self, user_id: str) -> None:
        """Count one assistant exchange."""
        self._increment(user_id, CHAT_COUNTER, CHAT_TIMESTAMP)

    def _increment(self, user_id: str, counter: str, timestamp_field: str) -> None:
        self.queue.submit(
            f"usage:{counter}",
            lambda: self.repository.increment_counter(
                user_id, counter, timestamp_field
            ),
        )
