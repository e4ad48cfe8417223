"""Caller identity verification."""

from typing import Protocol


class IdentityVerifier(Protocol):
    """Interface for resolving a bearer token to a verified caller id."""

    def verify(self, token: str) -> str | None:
        """Return the caller id, or None when the token is not valid."""
