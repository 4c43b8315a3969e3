"""OpenAI-compatible chat completion request and response types."""

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
    if kind is float:
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return float(value) if kind is float else value


def _list(data: Mapping[str, Any], key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


def _content_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "".join(
            str(part.get("text") or "")
            for part in value
            if isinstance(part, Mapping) and part.get("type") == "text"
        )
    raise ValueError("message content must be a string or a list of parts")


@dataclass
class Message:
    """One chat message."""

    role: str = ""
    content: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.name:
            result["name"] = self.name
        return result


def _message_from_dict(data: Any) -> Message:
    data = _require_mapping(data, "message")
    return Message(
        role=_field(data, "role", str, ""),
        content=_content_text(data.get("content")),
        name=_field(data, "name", str, ""),
    )


@dataclass
class ResponseFormat:
    """Requested response format, such as ``json_object`` or ``text``."""

    type: str = ""


@dataclass
class Function:
    """A function a tool exposes."""

    name: str = ""
    description: str = ""
    parameters: Any = None


@dataclass
class Tool:
    """A tool offered to the model."""

    type: str = "function"
    function: Function | None = None


def _tool_from_dict(data: Any) -> Tool:
    data = _require_mapping(data, "tool")
    function = None
    raw_function = data.get("function")
    if raw_function is not None:
        raw_function = _require_mapping(raw_function, "function")
        function = Function(
            name=_field(raw_function, "name", str, ""),
            description=_field(raw_function, "description", str, ""),
            parameters=raw_function.get("parameters"),
        )
    return Tool(type=_field(data, "type", str, ""), function=function)


def _tool_to_dict(tool: Tool) -> dict[str, Any]:
    result: dict[str, Any] = {"type": tool.type}
    if tool.function is not None:
        function: dict[str, Any] = {"name": tool.function.name}
        if tool.function.description:
            function["description"] = tool.function.description
        if tool.function.parameters is not None:
            function["parameters"] = tool.function.parameters
        result["function"] = function
    return result


@dataclass
class ChatCompletionRequest:
    """An incoming chat completion request; unset numbers are zero."""

    model: str = ""
    messages: list[Message] = field(default_factory=list)
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    response_format: ResponseFormat | None = None
    seed: int | None = None
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] | None = None
    logprobs: bool = False
    top_logprobs: int = 0
    user: str = ""
    tools: list[Tool] = field(default_factory=list)
    tool_choice: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionRequest:
        data = _require_mapping(data, "request")
        stop = data.get("stop")
        if stop is None:
            stop_list: list[str] = []
        elif isinstance(stop, str):
            stop_list = [stop]
        elif isinstance(stop, list) and all(isinstance(s, str) for s in stop):
            stop_list = list(stop)
        else:
            raise ValueError("field 'stop' must be a string or a list of strings")

        response_format = None
        raw_format = data.get("response_format")
        if raw_format is not None:
            raw_format = _require_mapping(raw_format, "response_format")
            response_format = ResponseFormat(type=_field(raw_format, "type", str, ""))

        logit_bias = data.get("logit_bias")
        if logit_bias is not None:
            logit_bias = dict(_require_mapping(logit_bias, "logit_bias"))

        return cls(
            model=_field(data, "model", str, ""),
            messages=[_message_from_dict(m) for m in _list(data, "messages")],
            max_tokens=_field(data, "max_tokens", int, 0),
            temperature=_field(data, "temperature", float, 0.0),
            top_p=_field(data, "top_p", float, 0.0),
            n=_field(data, "n", int, 0),
            stream=_field(data, "stream", bool, False),
            stop=stop_list,
            presence_penalty=_field(data, "presence_penalty", float, 0.0),
            response_format=response_format,
            seed=_field(data, "seed", int, None),
            frequency_penalty=_field(data, "frequency_penalty", float, 0.0),
            logit_bias=logit_bias,
            logprobs=_field(data, "logprobs", bool, False),
            top_logprobs=_field(data, "top_logprobs", int, 0),
            user=_field(data, "user", str, ""),
            tools=[_tool_from_dict(t) for t in _list(data, "tools")],
            tool_choice=data.get("tool_choice"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        optional = {
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "stream": self.stream,
            "stop": list(self.stop),
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "logit_bias": self.logit_bias,
            "logprobs": self.logprobs,
            "top_logprobs": self.top_logprobs,
            "user": self.user,
            "tools": [_tool_to_dict(t) for t in self.tools],
        }
        result.update({key: value for key, value in optional.items() if value})
        if self.response_format is not None:
            result["response_format"] = {"type": self.response_format.type}
        if self.seed is not None:
            result["seed"] = self.seed
        if self.tool_choice is not None:
            result["tool_choice"] = self.tool_choice
        return result


@dataclass
class ResponseMessage:
    """The message inside a completion choice."""

    role: str = ""
    content: str = ""


@dataclass
class Usage:
    """Token accounting."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> dict[str, Any]:
        values = {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }
        return {key: value for key, value in values.items() if value}


@dataclass
class ErrorDetail:
    """Error information attached to a response."""

    message: str = ""
    type: str = ""
    param: Any = None
    code: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.message:
            result["message"] = self.message
        if self.type:
            result["type"] = self.type
        if self.param is not None:
            result["param"] = self.param
        if self.code is not None:
            result["code"] = self.code
        return result


@dataclass
class Choice:
    """One choice of a non-streamed completion."""

    index: int = 0
    message: ResponseMessage = field(default_factory=ResponseMessage)
    log_probs: Any = None
    finish_reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "message": {"role": self.message.role, "content": self.message.content},
            "logprobs": self.log_probs,
            "finish_reason": self.finish_reason,
        }


@dataclass
class OpenAIResponse:
    """A non-streamed chat completion response."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    system_fingerprint: str = ""
    choices: list[Choice] = field(default_factory=list)
    usage: Usage | None = None
    error: ErrorDetail | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id}
        for key in ("object", "created", "model", "system_fingerprint"):
            value = getattr(self, key)
            if value:
                result[key] = value
        if self.choices:
            result["choices"] = [c.to_dict() for c in self.choices]
        if self.usage is not None:
            result["usage"] = self.usage.to_dict()
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


@dataclass
class Delta:
    """Incremental message content of a streamed chunk."""

    role: str = ""
    content: str = ""


@dataclass
class StreamChoice:
    """One choice of a streamed chunk."""

    index: int = 0
    delta: Delta = field(default_factory=Delta)
    logprobs: Any = None
    finish_reason: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.index:
            result["index"] = self.index
        delta: dict[str, Any] = {}
        if self.delta.role:
            delta["role"] = self.delta.role
        if self.delta.content:
            delta["content"] = self.delta.content
        result["delta"] = delta
        if self.logprobs is not None:
            result["logprobs"] = self.logprobs
        if self.finish_reason is not None:
            result["finish_reason"] = self.finish_reason
        return result


@dataclass
class OpenAIStreamResponse:
    """A streamed chat completion chunk."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    system_fingerprint: str = ""
    choices: list[StreamChoice] = field(default_factory=list)
    usage: Usage | None = None
    error: ErrorDetail | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key in ("id", "object", "created", "model", "system_fingerprint"):
            value = getattr(self, key)
            if value:
                result[key] = value
        if self.choices:
            result["choices"] = [c.to_dict() for c in self.choices]
        if self.usage is not None:
            result["usage"] = self.usage.to_dict()
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result