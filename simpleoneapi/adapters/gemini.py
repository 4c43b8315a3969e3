"""Conversion between OpenAI chat completions and Gemini generateContent."""

from __future__ import annotations

import time
from datetime import datetime

from simpleoneapi.llm.gemini import (
    Candidate,
    ContentEntity,
    GeminiRequest,
    GeminiResponse,
    GenerationConfig,
    Part,
)
from simpleoneapi.messages import convert_system_messages_to_no_system
from simpleoneapi.schema import (
    ChatCompletionRequest,
    Choice,
    Delta,
    OpenAIResponse,
    OpenAIStreamResponse,
    ResponseMessage,
    StreamChoice,
    Usage,
)


def openai_request_to_gemini_request(request: ChatCompletionRequest) -> GeminiRequest:
    """Build a Gemini request; assistant turns become ``model`` turns."""
    contents = [
        ContentEntity(
            role="model" if msg.role.lower() == "assistant" else msg.role,
            parts=[Part(text=msg.content)],
        )
        for msg in convert_system_messages_to_no_system(request.messages)
    ]
    return GeminiRequest(
        contents=contents,
        safety_settings=[],
        generation_config=GenerationConfig(
            stop_sequences=list(request.stop),
            temperature=request.temperature,
            max_output_tokens=request.max_tokens,
            top_p=request.top_p,
            top_k=request.top_logprobs,
        ),
    )


def _role_and_text(candidate: Candidate) -> tuple[str, str]:
    role = candidate.content.role
    if role.lower() == "model":
        role = "assistant"
    parts = candidate.content.parts
    return role, parts[0].text if parts else ""


def _usage(resp: GeminiResponse) -> Usage:
    meta = resp.usage_metadata
    return Usage(
        prompt_tokens=meta.prompt_token_count,
        completion_tokens=meta.candidates_token_count,
        total_tokens=meta.total_token_count,
    )


def gemini_response_to_openai_response(resp: GeminiResponse) -> OpenAIResponse:
    """Convert a non-streamed Gemini response."""
    choices = []
    for candidate in resp.candidates:
        role, content = _role_and_text(candidate)
        choices.append(
            Choice(
                index=candidate.index,
                message=ResponseMessage(role=role, content=content),
                finish_reason=candidate.finish_reason,
            )
        )
    return OpenAIResponse(object="chat.completion", usage=_usage(resp), choices=choices)


def gemini_response_to_openai_stream_response(
    resp: GeminiResponse | None,
) -> OpenAIStreamResponse | None:
    """Convert one Gemini stream event into a chunk."""
    if resp is None:
        return None
    choices = []
    for i, candidate in enumerate(resp.candidates):
        role, content = _role_and_text(candidate)
        choices.append(
            StreamChoice(
                index=i,
                delta=Delta(role=role, content=content),
                finish_reason=candidate.finish_reason,
            )
        )
    return OpenAIStreamResponse(
        id="chatcmpl-" + datetime.now().strftime("%Y%m%d%H%M%S"),
        object="chat.completion.chunk",
        created=int(time.time()),
        choices=choices,
        usage=_usage(resp),
    )