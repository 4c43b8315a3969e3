"""Conversion between OpenAI chat completions and MiniMax chat."""

from __future__ import annotations

import logging

from simpleoneapi.llm.minimax import (
    BotSetting,
    MinimaxMessage,
    MinimaxRequest,
    MinimaxResponse,
    ReplyConstraints,
)
from simpleoneapi.schema import (
    ChatCompletionRequest,
    Choice,
    Delta,
    ErrorDetail,
    OpenAIResponse,
    OpenAIStreamResponse,
    ResponseMessage,
    StreamChoice,
    Usage,
)

BOT_NAME = "BOT"

_log = logging.getLogger(__name__)


def openai_request_to_minimax_request(request: ChatCompletionRequest) -> MinimaxRequest:
    """Build a MiniMax request; a leading system message becomes the bot persona."""
    messages = list(request.messages)
    persona = BOT_NAME
    if messages and messages[0].role.upper() == "SYSTEM":
        persona = messages[0].content
        if len(messages) == 1:
            _log.info("message only has a SYSTEM message")
        messages = messages[1:]

    converted = []
    for msg in messages:
        role = msg.role.upper()
        if role == "ASSISTANT":
            role = BOT_NAME
        converted.append(MinimaxMessage(sender_type=role, sender_name=role, text=msg.content))

    tokens = 8192 if request.model == "abab6-chat" else request.max_tokens
    return MinimaxRequest(
        model=request.model,
        stream=request.stream,
        tokens_to_generate=tokens,
        temperature=request.temperature,
        top_p=request.top_p,
        messages=converted,
        bot_setting=[BotSetting(bot_name=BOT_NAME, content=persona)],
        reply_constraints=ReplyConstraints(sender_type=BOT_NAME, sender_name=BOT_NAME),
    )


def minimax_response_to_openai_stream_response(resp: MinimaxResponse) -> OpenAIStreamResponse:
    """Convert one MiniMax stream event; each reply message becomes a choice."""
    choices = [
        StreamChoice(
            index=choice.index,
            delta=Delta(role="assistant", content=msg.text),
            finish_reason=choice.finish_reason,
        )
        for choice in resp.choices
        for msg in choice.messages
    ]
    return OpenAIStreamResponse(
        id=resp.id,
        object="chat.completion.chunk",
        created=resp.created,
        model=resp.model,
        choices=choices,
        usage=Usage(total_tokens=resp.usage.total_tokens),
    )


def minimax_response_to_openai_response(resp: MinimaxResponse | None) -> OpenAIResponse | None:
    """Convert a non-streamed MiniMax response, taking the first message of each choice."""
    if resp is None:
        return None
    choices = []
    for choice in resp.choices:
        if not choice.messages:
            raise ValueError(f"choice {choice.index} has no messages")
        first = choice.messages[0]
        choices.append(
            Choice(
                index=choice.index,
                message=ResponseMessage(role="assistant", content=first.text),
                finish_reason=choice.finish_reason,
            )
        )
    error = None
    if resp.base_resp.status_code != 0:
        error = ErrorDetail(message=resp.base_resp.status_msg, code=resp.base_resp.status_code)
    return OpenAIResponse(
        id=resp.id,
        created=resp.created,
        model=resp.model,
        choices=choices,
        usage=Usage(total_tokens=resp.usage.total_tokens),
        error=error,
    )