"""Completion provider interface and request defaults."""

from dataclasses import dataclass
from typing import Protocol


class CompletionClient(Protocol):
    """Interface for chat-style LLM completions."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Return the text content of the first completion choice."""


@dataclass(frozen=True)
class SamplingOptions:
    """Token budget and temperature for a single completion call."""

    max_tokens: int
    temperature: float


ANALYSIS_SAMPLING = SamplingOptions(max_tokens=1000, temperature=0.3)
MEAL_PLAN_SAMPLING = SamplingOptions(max_tokens=4000, temperature=0.7)
RECIPE_SAMPLING = SamplingOptions(max_tokens=2000, temperature=0.7)
CHAT_SAMPLING = SamplingOptions(max_tokens=800, temperature=0.7)
