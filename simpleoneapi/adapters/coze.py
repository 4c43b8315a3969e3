"""Conversion between OpenAI chat completions and Coze chat."""

from __future__ import annotations

import time

from simpleoneapi.llm.coze import CozeMessage, CozeRequest, Response, StreamResponse
from simpleoneapi.messages import convert_system_messages_to_no_system
from simpleoneapi.schema import (
    ChatCompletionRequest,
    Choice,
    Delta,
    ErrorDetail,
    OpenAIResponse,
    OpenAIStreamResponse,
    ResponseMessage,
    StreamChoice,
)

DEFAULT_USER = "12345678"
DEFAULT_CONVERSATION_ID = "123"


def openai_request_to_coze_request(request: ChatCompletionRequest) -> CozeRequest:
    """Build a Coze request: the last message is the query, the rest the history.

    A leading system message is folded into the message after it.
    """
    history = convert_system_messages_to_no_system(request.messages)
    if not history:
        raise ValueError("request has no messages")
    *earlier, last = history
    chat_history = [
        CozeMessage(
            role=msg.role,
            type="answer" if msg.role.lower() == "assistant" else "",
            content=msg.content,
            content_type="text",
        )
        for msg in earlier
    ]
    return CozeRequest(
        conversation_id=DEFAULT_CONVERSATION_ID,
        bot_id=request.model,
        user=request.user or DEFAULT_USER,
        query=last.content,
        stream=request.stream,
        chat_history=chat_history,
    )


def coze_response_to_openai_response(resp: Response) -> OpenAIResponse:
    """Convert a non-streamed Coze response; verbose messages are dropped."""
    if resp.code != 0:
        return OpenAIResponse(
            id=resp.conversation_id,
            error=ErrorDetail(message=resp.msg, code=resp.code),
        )
    choices = [
        Choice(
            index=i,
            message=ResponseMessage(role=msg.role, content=msg.content),
            finish_reason="stop",
        )
        for i, msg in enumerate(resp.messages)
        if msg.type != "verbose"
    ]
    # Any code other than 200 is reported alongside the choices.
    error = ErrorDetail(code=str(resp.code), message=resp.msg) if resp.code != 200 else None
    return OpenAIResponse(
        id=resp.conversation_id,
        object="text_completion",
        created=int(time.time()),
        choices=choices,
        error=error,
    )


def coze_response_to_openai_stream_response(resp: StreamResponse) -> OpenAIStreamResponse:
    """Convert one Coze stream event into a chunk."""
    choices = []
    if resp.event == "message":
        choices.append(
            StreamChoice(
                index=resp.index,
                delta=Delta(role=resp.message.role, content=resp.message.content),
            )
        )
    error = None
    if resp.event == "error":
        error = ErrorDetail(
            message=resp.error_information.msg, code=resp.error_information.code
        )
    return OpenAIStreamResponse(
        id=resp.conversation_id,
        object="chat.completion.chunk",
        created=int(time.time()),
        choices=choices,
        error=error,
    )