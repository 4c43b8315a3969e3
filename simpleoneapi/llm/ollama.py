"""Ollama chat request and response types."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
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


@dataclass
class OllamaMessage:
    """A chat message sent to Ollama."""

    role: str = ""
    content: str = ""
    images: list[str] = field(default_factory=list)


@dataclass
class AdvancedModelOptions:
    """Model options; zero values are omitted."""

    temperature: float = 0.0
    seed: int = 0
    mirostat: int = 0
    mirostat_eta: float = 0.0
    mirostat_tau: float = 0.0
    num_ctx: int = 0
    repeat_last_n: int = 0
    repeat_penalty: float = 0.0
    stop: str = ""
    tfs_z: float = 0.0
    num_predict: int = 0
    top_k: int = 0
    top_p: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


@dataclass
class ChatRequest:
    """An Ollama /api/chat request."""

    model: str = ""
    messages: list[OllamaMessage] = field(default_factory=list)
    stream: bool = False
    format: str = ""
    options: AdvancedModelOptions = field(default_factory=AdvancedModelOptions)
    keep_alive: str = ""

    def to_dict(self) -> dict[str, Any]:
        messages = []
        for msg in self.messages:
            entry: dict[str, Any] = {"role": msg.role, "content": msg.content}
            if msg.images:
                entry["images"] = list(msg.images)
            messages.append(entry)
        result: dict[str, Any] = {"model": self.model, "messages": messages, "stream": self.stream}
        if self.format:
            result["format"] = self.format
        result["options"] = self.options.to_dict()
        if self.keep_alive:
            result["keep_alive"] = self.keep_alive
        return result


@dataclass
class ChatMessage:
    """A chat message returned by Ollama."""

    role: str = ""
    content: str = ""
    images: list[str] = field(default_factory=list)


@dataclass
class ChatResponse:
    """An Ollama /api/chat response or stream line."""

    model: str = ""
    created_at: str = ""
    message: ChatMessage = field(default_factory=ChatMessage)
    done: bool = False
    total_duration: int = 0
    load_duration: int = 0
    prompt_eval_count: int = 0
    prompt_eval_duration: int = 0
    eval_count: int = 0
    eval_duration: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ChatResponse:
        data = _require_mapping(data, "response")
        message = ChatMessage()
        raw_message = data.get("message")
        if raw_message is not None:
            raw_message = _require_mapping(raw_message, "message")
            images = _field(raw_message, "images", list, [])
            message = ChatMessage(
                role=_field(raw_message, "role", str, ""),
                content=_field(raw_message, "content", str, ""),
                images=[str(i) for i in images],
            )
        return cls(
            model=_field(data, "model", str, ""),
            created_at=_field(data, "created_at", str, ""),
            message=message,
            done=_field(data, "done", bool, False),
            total_duration=_field(data, "total_duration", int, 0),
            load_duration=_field(data, "load_duration", int, 0),
            prompt_eval_count=_field(data, "prompt_eval_count", int, 0),
            prompt_eval_duration=_field(data, "prompt_eval_duration", int, 0),
            eval_count=_field(data, "eval_count", int, 0),
            eval_duration=_field(data, "eval_duration", int, 0),
        )