"""Conversion between OpenAI chat completions and Qianfan (ERNIE) chat."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from simpleoneapi.llm.qianfan_types import QianFanRequest, QianFanResponse
from simpleoneapi.schema import (
    ChatCompletionRequest,
    Choice,
    Delta,
    ErrorDetail,
    Message,
    OpenAIResponse,
    OpenAIStreamResponse,
    ResponseMessage,
    StreamChoice,
    Usage,
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _TokenLimits:
    minimum: int
    maximum: int
    default_max: int


_MODEL_LIMITS: dict[str, _TokenLimits] = {
    "ERNIE-4.0-8K": _TokenLimits(2, 2048, 2048),
    "ERNIE-3.5-8K": _TokenLimits(2, 2048, 2048),
    "ERNIE-3.5-128K": _TokenLimits(2, 4096, 4096),
    "ERNIE-Speed-8K": _TokenLimits(2, 2048, 2048),
    "ERNIE-Speed-128K": _TokenLimits(2, 4096, 4096),
    "ERNIE-Lite-8K": _TokenLimits(2, 1024, 1024),
    "ERNIE-Lite-128K": _TokenLimits(2, 2048, 2048),
    "ERNIE-Tiny-8K": _TokenLimits(2, 2048, 2048),
}


def validate_max_tokens(max_tokens: int, minimum: int, maximum: int, default_max: int) -> int:
    """Clamp ``max_tokens`` into ``[minimum, maximum]``; zero means ``default_max``."""
    if max_tokens == 0:
        return default_max
    if max_tokens < minimum:
        return minimum
    if max_tokens > maximum:
        return maximum
    return max_tokens


def check_max_tokens(model: str, max_tokens: int) -> int:
    """Adjust ``max_tokens`` to the limits of the model family; 0 for unknown models."""
    for prefix, limits in _MODEL_LIMITS.items():
        if model.startswith(prefix):
            return validate_max_tokens(
                max_tokens, limits.minimum, limits.maximum, limits.default_max
            )
    _log.warning("Unknown model prefix")
    return 0


def openai_request_to_qianfan_request(request: ChatCompletionRequest) -> QianFanRequest:
    """Build a Qianfan request; a leading system message becomes the ``system`` field."""
    messages = list(request.messages)
    system = None
    if messages and messages[0].role.upper() == "SYSTEM":
        system = messages[0].content
        messages = messages[1:]

    max_output_tokens = None
    if request.max_tokens > 0:
        max_output_tokens = check_max_tokens(request.model, request.max_tokens)

    top_p = min(max(request.top_p, 0.0), 1.0)

    temperature = request.temperature
    if temperature <= 0:
        temperature = 0.1
    if temperature > 1:
        temperature = 1.0

    penalty = request.frequency_penalty
    if penalty < 1.0:
        penalty = 1.0
    elif penalty > 2.0:
        penalty = 2.0

    return QianFanRequest(
        messages=[Message(role=m.role, content=m.content) for m in messages],
        stream=request.stream,
        temperature=temperature,
        top_p=top_p,
        penalty_score=penalty,
        system=system,
        stop=list(request.stop),
        max_output_tokens=max_output_tokens,
        user_id=request.user,
    )


def _usage(resp: QianFanResponse) -> Usage:
    return Usage(
        prompt_tokens=resp.usage.prompt_tokens,
        completion_tokens=resp.usage.completion_tokens,
        total_tokens=resp.usage.total_tokens,
    )


def _has_error(resp: QianFanResponse) -> bool:
    return resp.error_code != 0 and bool(resp.error_msg)


def qianfan_response_to_openai_response(resp: QianFanResponse) -> OpenAIResponse:
    """Convert a non-streamed Qianfan response."""
    if _has_error(resp):
        return OpenAIResponse(
            id=resp.id,
            error=ErrorDetail(message=resp.error_msg, code=resp.error_code),
        )
    finish_reason = "stop" if resp.is_end else "completed"
    result = OpenAIResponse(
        id=resp.id,
        object=resp.object,
        created=resp.created,
        usage=_usage(resp),
        choices=[
            Choice(
                index=0,
                message=ResponseMessage(role="assistant", content=resp.result),
                finish_reason=finish_reason,
            )
        ],
    )
    _log.info("resp %s", result)
    return result


def qianfan_response_to_openai_stream_response(resp: QianFanResponse) -> OpenAIStreamResponse:
    """Convert one Qianfan stream event into a chunk."""
    if _has_error(resp):
        _log.error("something error")
        return OpenAIStreamResponse(
            error=ErrorDetail(
                message=resp.error_msg,
                type="invalid_request_error",
                code=resp.error_code,
            )
        )
    result = OpenAIStreamResponse(
        id=resp.id,
        object="chat.completion.chunk",
        created=resp.created,
        usage=_usage(resp),
        choices=[
            StreamChoice(
                index=0,
                delta=Delta(role="assistant", content=resp.result),
                finish_reason="stop" if resp.is_end else None,
            )
        ],
    )
    _log.info("resp %s", result)
    return result