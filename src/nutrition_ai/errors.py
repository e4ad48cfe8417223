"""Typed failures returned by callable endpoints."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

_logger = logging.getLogger(__name__)


class CallError(Exception):
    """Failure with a machine-readable kind and a human-readable message.

    Attributes:
        kind: short error kind sent to clients (``invalid-argument``...)
        message: human-readable message
        http_status: status code used by the HTTP layer
    """

    kind = "internal"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind, "message": self.message}

    def __str__(self) -> str:
        return self.message


class UnauthenticatedError(CallError):
    """Raised when the request carries no verified caller."""

    kind = "unauthenticated"
    http_status = 401

    def __init__(self, message: str = "User must be authenticated") -> None:
        super().__init__(message)


class InvalidArgumentError(CallError):
    """Raised when a required field is missing or invalid."""

    kind = "invalid-argument"
    http_status = 400


class InternalError(CallError):
    """Raised for downstream, parse, or unexpected failures."""

    kind = "internal"
    http_status = 500


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise downstream failures as ``InternalError`` prefixed by action.

    Caller input errors pass through untouched.
    """
    try:
        yield
    except (UnauthenticatedError, InvalidArgumentError):
        raise
    except InternalError as exc:
        _logger.warning("%s: %s", action, exc.message)
        raise InternalError(f"{action}: {exc.message}") from exc
    except Exception as exc:
        _logger.exception("%s", action)
        raise InternalError(f"{action}: {exc}") from exc
