"""Conversational nutrition assistant."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from nutrition_ai.domain.chat import (
    ChatMessage,
    ChatTurn,
    StoredProfile,
    UserProfileSnapshot,
)
from nutrition_ai.errors import InternalError, InvalidArgumentError, translate_errors
from nutrition_ai.services.background import OutboundTaskQueue
from nutrition_ai.services.completions import CHAT_SAMPLING, CompletionClient
from nutrition_ai.services.profiles import ProfileRepository
from nutrition_ai.services.usage import UsageService

HISTORY_LIMIT = 6
DEFAULT_FIBER_GRAMS = 30
DEFAULT_SODIUM_LIMIT_MG = 2300
DEFAULT_GI_LIMIT = 55

_SYSTEM_PROMPT = """You are Sara, a friendly, knowledgeable, and personalized \
AI nutrition assistant.

{profile}

YOUR ROLE:
- Provide personalized nutrition advice based on the user's profile
- Consider their health conditions when making recommendations
- Suggest foods and meals that align with their dietary preferences
- Help them achieve their calorie and macro goals
- Be culturally aware and suggest foods relevant to their country

RESPONSE GUIDELINES:
- Be conversational, warm, and supportive
- Keep responses concise but comprehensive
- For users with high blood pressure: focus on low-sodium options
- For users with diabetes/prediabetes: emphasize low GI foods
- Do not give specific medical advice; recommend consulting a healthcare \
professional for medical questions

FORMAT YOUR RESPONSES:
- Use bullet points for lists and numbered lists for steps
- Use bold (**text**) for emphasis
- Keep paragraphs short and scannable"""


class ChatSessionRepository(Protocol):
    """Persistence interface for chat sessions and their messages."""

    def touch_session(
        self, user_id: str, session_id: str, updated_at: datetime
    ) -> None:
        """Create the session if missing and set its update timestamp."""

    def append_messages(
        self, user_id: str, session_id: str, messages: list[ChatMessage]
    ) -> None:
        """Append messages to the session in order."""


@dataclass
class ChatService:
    """Answers user messages with profile-aware completions."""

    client: CompletionClient
    model: str
    profile_repository: ProfileRepository
    session_repository: ChatSessionRepository
    usage_service: UsageService
    queue: OutboundTaskQueue

    async def reply(
        self,
        user_id: str,
        message: str | None,
        *,
        history: list[ChatTurn] | None = None,
        session_id: str | None = None,
        profile: UserProfileSnapshot | None = None,
    ) -> str:
        """Return the assistant reply and record the exchange in the background."""
        if not message or not message.strip():
            raise InvalidArgumentError("Message is required")

        asked_at = datetime.now(tz=UTC)
        with translate_errors("Chat error"):
            if profile is not None:
                profile_block = render_profile_snapshot(profile)
            else:
                stored = self.profile_repository.get_profile(user_id)
                profile_block = render_stored_profile(stored) if stored else ""
            messages = build_messages(profile_block, history or [], message)
            reply = await self.client.complete(
                model=self.model,
                messages=messages,
                max_tokens=CHAT_SAMPLING.max_tokens,
                temperature=CHAT_SAMPLING.temperature,
            )
            if not reply:
                raise InternalError("No response from AI")

        if session_id:
            self._save_exchange(user_id, session_id, message, reply, asked_at)
        self.usage_service.record_chat_message(user_id)
        return reply

    def _save_exchange(  # noqa: PLR0913
        self,
        user_id: str,
        session_id: str,
        message: str,
        reply: str,
        asked_at: datetime,
    ) -> None:
        # Message order is carried by created_at, so the reply sorts after.
        replied_at = max(datetime.now(tz=UTC), asked_at + timedelta(microseconds=1))

        def save() -> None:
            self.session_repository.touch_session(user_id, session_id, replied_at)
            self.session_repository.append_messages(
                user_id,
                session_id,
                [
                    ChatMessage(role="user", content=message, timestamp=asked_at),
                    ChatMessage(role="assistant", content=reply, timestamp=replied_at),
                ],
            )

        self.queue.submit("chat:session", save)


def build_messages(
    profile_block: str, history: list[ChatTurn], message: str
) -> list[dict[str, object]]:
    """Assemble the system prompt, the recent history, and the new message."""
    messages: list[dict[str, object]] = [
        {"role": "system", "content": _SYSTEM_PROMPT.format(profile=profile_block)}
    ]
    for turn in history[-HISTORY_LIMIT:]:
        messages.append({"role": turn.role, "content": turn.content})
    messages.append({"role": "user", "content": message})
    return messages


def render_profile_snapshot(profile: UserProfileSnapshot) -> str:
    """Render an inline profile as a prompt block."""
    macros = profile.macro_targets
    conditions = profile.health_conditions
    lines = [
        "USER PROFILE - Use this to personalize your responses:",
        "Basic info:",
        f"- Name: {profile.name or 'Not provided'}",
        f"- Age: {profile.age or 'Not provided'}",
        f"- Gender: {profile.gender or 'Not provided'}",
        f"- Country: {profile.country or 'Not provided'}",
        "Body metrics:",
        f"- Height: {_with_unit(profile.height_cm, ' cm', 'Not provided')}",
        f"- Weight: {_with_unit(profile.weight_kg, ' kg', 'Not provided')}",
        f"- BMI: {f'{profile.bmi:.1f}' if profile.bmi else 'Not calculated'}",
        f"- Activity level: {profile.activity_level or 'Not specified'}",
        "Goals:",
        f"- Primary goal: {profile.goal or 'Not specified'}",
        "- Daily calorie target: "
        f"{_with_unit(profile.daily_calorie_target, ' kcal', 'Not set')}",
        "Daily macro targets:",
        f"- Protein: {_with_unit(macros and macros.protein_grams, 'g', 'Not set')}",
        f"- Carbs: {_with_unit(macros and macros.carbs_grams, 'g', 'Not set')}",
        f"- Fat: {_with_unit(macros and macros.fat_grams, 'g', 'Not set')}",
        "- Fiber: "
        f"{_with_unit((macros and macros.fiber_grams) or DEFAULT_FIBER_GRAMS, 'g')}",
        f"Health conditions: {', '.join(conditions) or 'None'}",
    ]
    if "high_blood_pressure" in conditions:
        limit = profile.sodium_limit_mg or DEFAULT_SODIUM_LIMIT_MG
        lines.append(f"- Sodium limit: {limit:g}mg/day")
    if "diabetes" in conditions or "prediabetic" in conditions:
        lines.append(f"- GI limit: {(profile.gi_limit or DEFAULT_GI_LIMIT):g}")
    lines.append(
        f"Dietary preferences: {', '.join(profile.dietary_preferences) or 'None'}"
    )
    lines.append(
        "Always tailor advice to the user's health conditions, dietary "
        "preferences, calorie and macro targets, and country."
    )
    return "\n".join(lines)


def render_stored_profile(profile: StoredProfile) -> str:
    """Render a stored profile as a short prompt block."""
    return "\n".join(
        [
            "User Profile:",
            f"- Name: {profile.name or 'User'}",
            f"- Goal: {profile.goal or 'Not specified'}",
            "- Daily calorie target: "
            f"{_with_unit(profile.daily_calorie_target, ' kcal', 'Not set')}",
            f"- Health conditions: {', '.join(profile.health_conditions) or 'None'}",
            "- Dietary preferences: "
            f"{', '.join(profile.dietary_preferences) or 'None'}",
            f"- Activity level: {profile.activity_level or 'Not specified'}",
        ]
    )


def _with_unit(value: float | None, suffix: str, missing: str = "Not set") -> str:
    if not value:
        return missing
    return f"{value:g}{suffix}"
