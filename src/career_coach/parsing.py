"""Parsing of raw generated text into validated payloads."""

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from career_coach.errors import PayloadParseError

_FENCE_RE = re.compile(r"```(?:json)?\n?")


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markup around an embedded JSON block."""
    return _FENCE_RE.sub("", text).strip()


class TextShape:
    """Free-text payload: the trimmed generated text."""

    name = "text"

    def parse(self, text: str) -> str:
        cleaned = (text or "").strip()
        if not cleaned:
            raise PayloadParseError("Generated text is empty")
        return cleaned


class JsonShape:
    """Structured payload validated against a pydantic model.

    Returns the validated object as a JSON-compatible dict keyed by the
    model's aliases, so cached values can live in any backend.

    Example:
        ```python
        shape = JsonShape(QuizPayload)
        shape.parse('```json\\n{"questions": [...]}\\n```')
        ```
    """

    def __init__(self, model: type[BaseModel], name: str | None = None) -> None:
        self._model = model
        self.name = name or model.__name__

    @property
    def model(self) -> type[BaseModel]:
        return self._model

    def parse(self, text: str) -> dict[str, Any]:
        cleaned = strip_code_fences(text or "")
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise PayloadParseError(f"{self.name}: response is not valid JSON ({e.msg})") from e

        try:
            validated = self._model.model_validate(data)
        except ValidationError as e:
            raise PayloadParseError(
                f"{self.name}: response does not match schema ({e.error_count()} errors)"
            ) from e

        return validated.model_dump(mode="json", by_alias=True)
