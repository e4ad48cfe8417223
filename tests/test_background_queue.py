"""Tests for the outbound task queue."""

import asyncio

from nutrition_ai.services.background import OutboundTaskQueue


def test_submit_runs_task_and_counts_completion() -> None:
    queue = OutboundTaskQueue(retry_attempts=0, retry_delay_seconds=0)
    calls: list[str] = []

    async def run() -> None:
        queue.submit("write", lambda: calls.append("done"))
        assert queue.pending == 1
        await queue.drain()

    asyncio.run(run())

    assert calls == ["done"]
    assert queue.completed["write"] == 1
    assert queue.pending == 0


def test_failed_task_is_retried_then_counted() -> None:
    queue = OutboundTaskQueue(retry_attempts=2, retry_delay_seconds=0)
    attempts: list[int] = []

    def flaky() -> None:
        attempts.append(1)
        raise ConnectionError("store down")

    async def run() -> None:
        queue.submit("write", flaky)
        await queue.drain()

    asyncio.run(run())

    assert len(attempts) == 3
    assert queue.failures["write"] == 1
    assert queue.completed["write"] == 0


def test_task_succeeding_on_retry_counts_as_completed() -> None:
    queue = OutboundTaskQueue(retry_attempts=1, retry_delay_seconds=0)
    attempts: list[int] = []

    def flaky() -> None:
        attempts.append(1)
        if len(attempts) == 1:
            raise ConnectionError("transient")

    async def run() -> None:
        queue.submit("write", flaky)
        await queue.drain()

    asyncio.run(run())

    assert queue.completed["write"] == 1
    assert not queue.failures
