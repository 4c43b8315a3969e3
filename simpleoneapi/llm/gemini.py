"""Gemini generateContent request and response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


@dataclass
class Part:
    """A text part of a content entry."""

    text: str = ""


@dataclass
class ContentEntity:
    """One turn of a conversation."""

    role: str = ""
    parts: list[Part] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [{"text": p.text} for p in self.parts]}

    @classmethod
    def from_dict(cls, data: Any) -> ContentEntity:
        data = _require_mapping(data, "content")
        parts = [
            Part(text=_field(_require_mapping(p, "part"), "text", str, ""))
            for p in _list(data, "parts")
        ]
        return cls(role=_field(data, "role", str, ""), parts=parts)


@dataclass
class SafetySetting:
    """A safety threshold for a harm category."""

    category: str = ""
    threshold: str = ""


@dataclass
class GenerationConfig:
    """Sampling parameters; zero values are omitted."""

    stop_sequences: list[str] = field(default_factory=list)
    temperature: float = 0.0
    max_output_tokens: int = 0
    top_p: float = 0.0
    top_k: int = 0

    def to_dict(self) -> dict[str, Any]:
        values = {
            "stopSequences": list(self.stop_sequences),
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
            "topP": self.top_p,
            "topK": self.top_k,
        }
        return {key: value for key, value in values.items() if value}


@dataclass
class GeminiRequest:
    """A generateContent request body."""

    contents: list[ContentEntity] = field(default_factory=list)
    safety_settings: list[SafetySetting] = field(default_factory=list)
    generation_config: GenerationConfig = field(default_factory=GenerationConfig)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"contents": [c.to_dict() for c in self.contents]}
        if self.safety_settings:
            settings = []
            for setting in self.safety_settings:
                entry = {}
                if setting.category:
                    entry["category"] = setting.category
                if setting.threshold:
                    entry["threshold"] = setting.threshold
                settings.append(entry)
            result["safetySettings"] = settings
        result["generationConfig"] = self.generation_config.to_dict()
        return result


@dataclass
class SafetyRating:
    """A safety rating of a candidate."""

    category: str = ""
    probability: str = ""


@dataclass
class Candidate:
    """One generated candidate."""

    content: ContentEntity = field(default_factory=ContentEntity)
    finish_reason: str = ""
    index: int = 0
    safety_ratings: list[SafetyRating] = field(default_factory=list)


@dataclass
class UsageMetadata:
    """Token counts of a response."""

    prompt_token_count: int = 0
    candidates_token_count: int = 0
    total_token_count: int = 0


@dataclass
class GeminiResponse:
    """A generateContent response body."""

    candidates: list[Candidate] = field(default_factory=list)
    usage_metadata: UsageMetadata = field(default_factory=UsageMetadata)

    @classmethod
    def from_dict(cls, data: Any) -> GeminiResponse:
        data = _require_mapping(data, "response")
        candidates = []
        for raw in _list(data, "candidates"):
            raw = _require_mapping(raw, "candidate")
            content = raw.get("content")
            ratings = [
                SafetyRating(
                    category=_field(_require_mapping(r, "rating"), "category", str, ""),
                    probability=_field(r, "probability", str, ""),
                )
                for r in _list(raw, "safetyRatings")
            ]
            candidates.append(
                Candidate(
                    content=ContentEntity.from_dict(content) if content is not None else ContentEntity(),
                    finish_reason=_field(raw, "finishReason", str, ""),
                    index=_field(raw, "index", int, 0),
                    safety_ratings=ratings,
                )
            )
        usage = UsageMetadata()
        raw_usage = data.get("usageMetadata")
        if raw_usage is not None:
            raw_usage = _require_mapping(raw_usage, "usageMetadata")
            usage = UsageMetadata(
                prompt_token_count=_field(raw_usage, "promptTokenCount", int, 0),
                candidates_token_count=_field(raw_usage, "candidatesTokenCount", int, 0),
                total_token_count=_field(raw_usage, "totalTokenCount", int, 0),
            )
        return cls(candidates=candidates, usage_metadata=usage)