"""Validated request bodies for the HTTP endpoints.

Each `from_payload` accepts the decoded JSON body and raises
InvalidPayloadError for anything that is not an object with string fields.
Blank-but-present text is left for the engine to reject with EmptyInputError.
"""

from dataclasses import dataclass

from .errors import InvalidPayloadError


def _require_object(data) -> dict:
    if not isinstance(data, dict):
        raise InvalidPayloadError("Invalid JSON payload")
    return data


def _string_field(data: dict, name: str, required: bool = True):
    value = data.get(name)
    if value is None:
        if required:
            raise InvalidPayloadError(f"'{name}' is required")
        return None
    if not isinstance(value, str):
        raise InvalidPayloadError(f"'{name}' must be a string")
    return value


@dataclass(frozen=True)
class AnalysisRequest:
    text: str

    @classmethod
    def from_payload(cls, data) -> "AnalysisRequest":
        data = _require_object(data)
        return cls(text=_string_field(data, "text"))


@dataclass(frozen=True)
class InsertionRequest:
    text: str
    keyword: str

    @classmethod
    def from_payload(cls, data) -> "InsertionRequest":
        data = _require_object(data)
        return cls(text=_string_field(data, "text"), keyword=_string_field(data, "keyword"))


@dataclass(frozen=True)
class GrammarRequest:
    text: str
    language: str = None

    @classmethod
    def from_payload(cls, data) -> "GrammarRequest":
        data = _require_object(data)
        return cls(text=_string_field(data, "text"), language=_string_field(data, "language", required=False))
