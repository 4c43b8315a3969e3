"""MiniMax chatcompletion_pro request and response types."""

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
class MinimaxMessage:
    """One message of a MiniMax conversation."""

    sender_type: str = ""
    sender_name: str = ""
    text: str = ""


def _message_from_dict(data: Any) -> MinimaxMessage:
    data = _require_mapping(data, "message")
    return MinimaxMessage(
        sender_type=_field(data, "sender_type", str, ""),
        sender_name=_field(data, "sender_name", str, ""),
        text=_field(data, "text", str, ""),
    )


@dataclass
class BotSetting:
    """Name and persona of a bot."""

    bot_name: str = ""
    content: str = ""


@dataclass
class ReplyConstraints:
    """Who the model replies as."""

    sender_type: str = ""
    sender_name: str = ""


@dataclass
class MinimaxRequest:
    """A MiniMax chat request body."""

    model: str = ""
    stream: bool = False
    tokens_to_generate: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    mask_sensitive_info: bool = False
    messages: list[MinimaxMessage] = field(default_factory=list)
    bot_setting: list[BotSetting] = field(default_factory=list)
    reply_constraints: ReplyConstraints = field(default_factory=ReplyConstraints)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"model": self.model}
        optional = {
            "stream": self.stream,
            "tokens_to_generate": self.tokens_to_generate,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "mask_sensitive_info": self.mask_sensitive_info,
        }
        result.update({key: value for key, value in optional.items() if value})
        result["messages"] = [
            {"sender_type": m.sender_type, "sender_name": m.sender_name, "text": m.text}
            for m in self.messages
        ]
        result["bot_setting"] = [
            {"bot_name": b.bot_name, "content": b.content} for b in self.bot_setting
        ]
        result["reply_constraints"] = {
            "sender_type": self.reply_constraints.sender_type,
            "sender_name": self.reply_constraints.sender_name,
        }
        return result


@dataclass
class MinimaxChoice:
    """One result of a MiniMax reply."""

    messages: list[MinimaxMessage] = field(default_factory=list)
    index: int = 0
    finish_reason: str = ""


@dataclass
class MinimaxUsage:
    """Token usage of a MiniMax reply."""

    total_tokens: int = 0


@dataclass
class BaseResp:
    """Status code and message of a MiniMax reply."""

    status_code: int = 0
    status_msg: str = ""


@dataclass
class MinimaxResponse:
    """A MiniMax chat response or stream event."""

    created: int = 0
    model: str = ""
    reply: str = ""
    input_sensitive: bool = False
    input_sensitive_type: int = 0
    output_sensitive: bool = False
    output_sensitive_type: int = 0
    choices: list[MinimaxChoice] = field(default_factory=list)
    usage: MinimaxUsage = field(default_factory=MinimaxUsage)
    id: str = ""
    base_resp: BaseResp = field(default_factory=BaseResp)

    @classmethod
    def from_dict(cls, data: Any) -> MinimaxResponse:
        data = _require_mapping(data, "response")
        choices = []
        for raw in _list(data, "choices"):
            raw = _require_mapping(raw, "choice")
            choices.append(
                MinimaxChoice(
                    messages=[_message_from_dict(m) for m in _list(raw, "messages")],
                    index=_field(raw, "index", int, 0),
                    finish_reason=_field(raw, "finish_reason", str, ""),
                )
            )
        usage = MinimaxUsage()
        raw_usage = data.get("usage")
        if raw_usage is not None:
            raw_usage = _require_mapping(raw_usage, "usage")
            usage = MinimaxUsage(total_tokens=_field(raw_usage, "total_tokens", int, 0))
        base = BaseResp()
        raw_base = data.get("base_resp")
        if raw_base is not None:
            raw_base = _require_mapping(raw_base, "base_resp")
            base = BaseResp(
                status_code=_field(raw_base, "status_code", int, 0),
                status_msg=_field(raw_base, "status_msg", str, ""),
            )
        return cls(
            created=_field(data, "created", int, 0),
            model=_field(data, "model", str, ""),
            reply=_field(data, "reply", str, ""),
            input_sensitive=_field(data, "input_sensitive", bool, False),
            input_sensitive_type=_field(data, "input_sensitive_type", int, 0),
            output_sensitive=_field(data, "output_sensitive", bool, False),
            output_sensitive_type=_field(data, "output_sensitive_type", int, 0),
            choices=choices,
            usage=usage,
            id=_field(data, "id", str, ""),
            base_resp=base,
        )