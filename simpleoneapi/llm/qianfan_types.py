"""Qianfan (ERNIE) chat request and response types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from simpleoneapi.schema import Message


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


@dataclass
class QianFanRequest:
    """A Qianfan chat request; ``None`` fields are left out."""

    messages: list[Message] = field(default_factory=list)
    stream: bool | None = None
    temperature: float | None = None
    top_p: float | None = None
    penalty_score: float | None = None
    system: str | None = None
    stop: list[str] = field(default_factory=list)
    max_output_tokens: int | None = None
    user_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "messages": [{"role": m.role, "content": m.content} for m in self.messages]
        }
        for key in ("stream", "temperature", "top_p", "penalty_score", "system"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.stop:
            result["stop"] = list(self.stop)
        for key in ("max_output_tokens", "user_id"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass
class QianFanUsage:
    """Token counts of a Qianfan reply."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class QianFanResponse:
    """A Qianfan chat response or stream event."""

    id: str = ""
    object: str = ""
    created: int = 0
    sentence_id: int | None = None
    is_end: bool | None = None
    is_truncated: bool = False
    result: str = ""
    need_clear_history: bool = False
    ban_round: int | None = None
    usage: QianFanUsage = field(default_factory=QianFanUsage)
    error_code: int = 0
    error_msg: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> QianFanResponse:
        data = _require_mapping(data, "response")
        usage = QianFanUsage()
        raw_usage = data.get("usage")
        if raw_usage is not None:
            raw_usage = _require_mapping(raw_usage, "usage")
            usage = QianFanUsage(
                prompt_tokens=_field(raw_usage, "prompt_tokens", int, 0),
                completion_tokens=_field(raw_usage, "completion_tokens", int, 0),
                total_tokens=_field(raw_usage, "total_tokens", int, 0),
            )
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            created=_field(data, "created", int, 0),
            sentence_id=_field(data, "sentence_id", int, None),
            is_end=_field(data, "is_end", bool, None),
            is_truncated=_field(data, "is_truncated", bool, False),
            result=_field(data, "result", str, ""),
            need_clear_history=_field(data, "need_clear_history", bool, False),
            ban_round=_field(data, "ban_round", int, None),
            usage=usage,
            error_code=_field(data, "error_code", int, 0),
            error_msg=_field(data, "error_msg", str, ""),
        )


@dataclass
class QianFanErrorResponse:
    """The error body Qianfan returns."""

    error_code: int = 0
    error_msg: str = ""
    id: str = ""