"""Read-only access to stored user profiles."""

from typing import Protocol

from nutrition_ai.domain.chat import StoredProfile


class ProfileRepository(Protocol):
    """Persistence interface for profiles set by the profile-management flow."""

    def get_profile(self, user_id: str) -> StoredProfile | None:
        """Return the user's stored profile, if any."""
