"""Supabase repository for chat sessions."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from nutrition_ai.domain.chat import ChatMessage
from nutrition_ai.services.chat import ChatSessionRepository


@dataclass
class SupabaseChatSessionRepository(ChatSessionRepository):
    """Supabase implementation for chat sessions and messages."""

    client: Client

    def touch_session(
        self, user_id: str, session_id: str, updated_at: datetime
    ) -> None:
        """Upsert the session row with a new update timestamp."""
        self.client.table("chat_sessions").upsert(
            {
                "id": session_id,
                "user_id": user_id,
                "updated_at": updated_at.isoformat(),
            }
        ).execute()

    def append_messages(
        self, user_id: str, session_id: str, messages: list[ChatMessage]
    ) -> None:
        """Insert message rows in a single batch, preserving order."""
        payload = [
            {
                "session_id": session_id,
                "user_id": user_id,
                "role": message.role,
                "content": message.content,
                "created_at": message.timestamp.isoformat(),
            }
            for message in messages
        ]
        if payload:
            self.client.table("chat_messages").insert(payload).execute()
