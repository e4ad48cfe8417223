"""OpenAI Chat Completions client."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from nutrition_ai.services.completions import CompletionClient


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float = 30.0, max_retries: int = 1
    ) -> "OpenAICompletionClient":
        """Create a client with a short timeout and bounded retries."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, timeout=timeout_seconds, max_retries=max_retries
            )
        )

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
        temperature: float,
    ) -> str | None:
        """Call the Chat Completions API and return the first choice text."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        await self.client.close()
