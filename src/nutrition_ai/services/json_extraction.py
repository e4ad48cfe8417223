"""Extraction of JSON objects from free-text model replies."""

import json
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from nutrition_ai.errors import InternalError

ModelT = TypeVar("ModelT", bound=BaseModel)

_DECODER = json.JSONDecoder()


def extract_json_object(text: str | None) -> dict[str, object]:
    """Return the first complete JSON object embedded in a model reply.

    Each ``{`` is tried in order and decoded incrementally, so braces inside
    string values, surrounding prose, code fences, and trailing objects do not
    confuse the boundary.
    """
    if not text:
        raise InternalError("No response from AI")
    start = text.find("{")
    if start == -1:
        raise InternalError("Could not parse AI response")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        return value
    raise InternalError("Could not parse AI response")


def parse_reply(text: str | None, model: type[ModelT]) -> ModelT:
    """Extract the reply's JSON object and validate it against a model."""
    raw = extract_json_object(text)
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise InternalError(
            f"AI response failed validation: {_summarize(exc)}"
        ) from exc


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "response"
        parts.append(f"{location} ({error['msg']})")
    return "; ".join(parts)
