"""Outbound queue for best-effort store writes."""

import asyncio
import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field

_logger = logging.getLogger(__name__)


@dataclass
class OutboundTaskQueue:
    """Runs side-effect writes without blocking the response path.

    Each submitted write runs on a worker thread inside its own asyncio task,
    retries with a linear backoff, and never raises to the submitter.
    Outcomes are counted per task name so failures stay observable.
    """

    retry_attempts: int = 2
    retry_delay_seconds: float = 0.5
    completed: Counter[str] = field(default_factory=Counter)
    failures: Counter[str] = field(default_factory=Counter)
    _tasks: set[asyncio.Task[None]] = field(default_factory=set)

    def submit(self, name: str, func: Callable[[], object]) -> None:
        """Schedule a blocking write; returns immediately."""
        task = asyncio.create_task(self._run(name, func))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every outstanding write to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(self, name: str, func: Callable[[], object]) -> None:
        attempt = 0
        while True:
            try:
                await asyncio.to_thread(func)
            except Exception as exc:
                attempt += 1
                if attempt > self.retry_attempts:
                    self.failures[name] += 1
                    _logger.warning(
                        "Background task %s failed after %s attempts: %s",
                        name,
                        attempt,
                        exc,
                    )
                    return
                await asyncio.sleep(self.retry_delay_seconds * attempt)
            else:
                self.completed[name] += 1
                return
