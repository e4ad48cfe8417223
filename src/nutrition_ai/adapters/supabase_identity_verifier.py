"""Supabase Auth-backed identity verifier."""

import logging
from dataclasses import dataclass

from supabase import Client

from nutrition_ai.services.identity import IdentityVerifier

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityVerifier(IdentityVerifier):
    """Verifies access tokens issued by Supabase Auth."""

    client: Client

    def verify(self, token: str) -> str | None:
        """Resolve the token to its user id."""
        try:
            response = self.client.auth.get_user(token)
        except Exception as exc:
            _logger.info("Rejected access token: %s", type(exc).__name__)
            return None
        if response is None or response.user is None:
            return None
        return str(response.user.id)
