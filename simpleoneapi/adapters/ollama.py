"""Conversion between OpenAI chat completions and Ollama chat."""

from __future__ import annotations

import uuid

from simpleoneapi.llm.ollama import (
    AdvancedModelOptions,
    ChatRequest,
    ChatResponse,
    OllamaMessage,
)
from simpleoneapi.schema import (
    ChatCompletionRequest,
    Choice,
    Delta,
    OpenAIResponse,
    OpenAIStreamResponse,
    ResponseFormat,
    ResponseMessage,
    StreamChoice,
    Usage,
)
from simpleoneapi.utils import parse_rfc3339nano_to_unix_time

_FORMATS = {"json_object": "json", "text": "text"}
_STOP_FINISH = "stop"
_LENGTH_FINISH = "length"


def _format(response_format: ResponseFormat | None) -> str:
    if response_format is None:
        return ""
    return _FORMATS.get(response_format.type, "")


def openai_request_to_ollama_request(request: ChatCompletionRequest) -> ChatRequest:
    """Build an Ollama chat request."""
    return ChatRequest(
        model=request.model,
        messages=[OllamaMessage(role=m.role, content=m.content) for m in request.messages],
        stream=request.stream,
        options=AdvancedModelOptions(
            temperature=request.temperature,
            top_p=request.top_p,
            num_predict=request.max_tokens,
        ),
        format=_format(request.response_format),
    )


def _created(value: str) -> int:
    try:
        return parse_rfc3339nano_to_unix_time(value)
    except ValueError:
        return 0


def _usage(resp: ChatResponse) -> Usage:
    return Usage(
        prompt_tokens=resp.prompt_eval_count,
        completion_tokens=resp.eval_count,
        total_tokens=resp.prompt_eval_count + resp.eval_count,
    )


def ollama_response_to_openai_response(resp: ChatResponse | None) -> OpenAIResponse | None:
    """Convert a non-streamed Ollama response."""
    if resp is None:
        return None
    return OpenAIResponse(
        id=str(uuid.uuid4()),
        created=_created(resp.created_at),
        model=resp.model,
        choices=[
            Choice(
                index=0,
                message=ResponseMessage(role=resp.message.role, content=resp.message.content),
            )
        ],
        usage=_usage(resp),
    )


def ollama_response_to_openai_stream_response(
    resp: ChatResponse | None,
) -> OpenAIStreamResponse | None:
    """Convert one Ollama stream line into a chunk."""
    if resp is None:
        return None
    return OpenAIStreamResponse(
        id=str(uuid.uuid4()),
        created=_created(resp.created_at),
        model=resp.model,
        choices=[
            StreamChoice(
                index=0,
                delta=Delta(role=resp.message.role, content=resp.message.content),
            )
        ],
        usage=_usage(resp),
    )


def determine_finish_reason(done: bool) -> str:
    """``stop`` for a finished reply, ``length`` otherwise."""
    if done:
        return _STOP_FINISH
    return _LENGTH_FINISH