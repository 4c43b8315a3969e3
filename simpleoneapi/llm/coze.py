"""Coze chat request and response types."""

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
class CozeMessage:
    """A message in a Coze conversation."""

    role: str = ""
    type: str = ""
    content: str = ""
    content_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"role": self.role}
        if self.type:
            result["type"] = self.type
        result["content"] = self.content
        result["content_type"] = self.content_type
        return result

    @classmethod
    def from_dict(cls, data: Any) -> CozeMessage:
        data = _require_mapping(data, "message")
        return cls(
            role=_field(data, "role", str, ""),
            type=_field(data, "type", str, ""),
            content=_field(data, "content", str, ""),
            content_type=_field(data, "content_type", str, ""),
        )


@dataclass
class CozeRequest:
    """A Coze chat request."""

    conversation_id: str = ""
    bot_id: str = ""
    user: str = ""
    query: str = ""
    stream: bool = False
    chat_history: list[CozeMessage] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "conversation_id": self.conversation_id,
            "bot_id": self.bot_id,
            "user": self.user,
            "query": self.query,
            "stream": self.stream,
        }
        if self.chat_history:
            result["chat_history"] = [m.to_dict() for m in self.chat_history]
        return result


@dataclass
class ErrorInformation:
    """Error carried by a Coze stream event."""

    code: int = 0
    msg: str = ""


@dataclass
class StreamResponse:
    """One event of a Coze stream."""

    event: str = ""
    message: CozeMessage = field(default_factory=CozeMessage)
    is_finish: bool = False
    index: int = 0
    conversation_id: str = ""
    error_information: ErrorInformation = field(default_factory=ErrorInformation)

    @classmethod
    def from_dict(cls, data: Any) -> StreamResponse:
        data = _require_mapping(data, "stream response")
        message = data.get("message")
        error = data.get("error_information")
        error_info = ErrorInformation()
        if error is not None:
            error = _require_mapping(error, "error_information")
            error_info = ErrorInformation(
                code=_field(error, "code", int, 0), msg=_field(error, "msg", str, "")
            )
        return cls(
            event=_field(data, "event", str, ""),
            message=CozeMessage.from_dict(message) if message is not None else CozeMessage(),
            is_finish=_field(data, "is_finish", bool, False),
            index=_field(data, "index", int, 0),
            conversation_id=_field(data, "conversation_id", str, ""),
            error_information=error_info,
        )


@dataclass
class Response:
    """A non-streamed Coze chat response."""

    messages: list[CozeMessage] = field(default_factory=list)
    conversation_id: str = ""
    code: int = 0
    msg: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Response:
        data = _require_mapping(data, "response")
        return cls(
            messages=[CozeMessage.from_dict(m) for m in _list(data, "messages")],
            conversation_id=_field(data, "conversation_id", str, ""),
            code=_field(data, "code", int, 0),
            msg=_field(data, "msg", str, ""),
        )