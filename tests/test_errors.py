"""Tests for callable error types and translation."""

import pytest

from nutrition_ai.errors import (
    InternalError,
    InvalidArgumentError,
    UnauthenticatedError,
    translate_errors,
)


def test_error_kinds_and_statuses() -> None:
    assert UnauthenticatedError().to_dict() == {
        "kind": "unauthenticated",
        "message": "User must be authenticated",
    }
    assert UnauthenticatedError.http_status == 401
    assert InvalidArgumentError("bad").to_dict()["kind"] == "invalid-argument"
    assert InvalidArgumentError.http_status == 400
    assert InternalError.http_status == 500


def test_translate_errors_passes_caller_errors_through() -> None:
    with pytest.raises(InvalidArgumentError, match="^bad input$"):
        with translate_errors("Failed to act"):
            raise InvalidArgumentError("bad input")


def test_translate_errors_wraps_unexpected_exceptions() -> None:
    with pytest.raises(InternalError, match="^Failed to act: boom$") as info:
        with translate_errors("Failed to act"):
            raise RuntimeError("boom")

    assert isinstance(info.value.__cause__, RuntimeError)


def test_translate_errors_prefixes_internal_errors() -> None:
    with pytest.raises(InternalError, match="^Failed to act: No response from AI$"):
        with translate_errors("Failed to act"):
            raise InternalError("No response from AI")
