"""Normalisation of responses from OpenAI-compatible upstreams."""

from __future__ import annotations

from typing import Any, Mapping

from simpleoneapi.schema import Choice, OpenAIResponse, ResponseMessage, Usage


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def openai_response_to_openai_response(resp: Mapping[str, Any] | None) -> OpenAIResponse | None:
    """Convert a decoded OpenAI chat completion body into the response type."""
    if resp is None:
        return None
    choices = []
    for raw in resp.get("choices") or []:
        raw = _mapping(raw)
        message = _mapping(raw.get("message"))
        choices.append(
            Choice(
                index=int(raw.get("index") or 0),
                message=ResponseMessage(
                    role=str(message.get("role") or ""),
                    content=str(message.get("content") or ""),
                ),
                log_probs=raw.get("logprobs"),
                finish_reason=str(raw.get("finish_reason") or ""),
            )
        )
    usage = _mapping(resp.get("usage"))
    return OpenAIResponse(
        id=str(resp.get("id") or ""),
        object=str(resp.get("object") or ""),
        created=int(resp.get("created") or 0),
        model=str(resp.get("model") or ""),
        system_fingerprint=str(resp.get("system_fingerprint") or ""),
        choices=choices,
        usage=Usage(
            prompt_tokens=int(usage.get("prompt_tokens") or 0),
            completion_tokens=int(usage.get("completion_tokens") or 0),
            total_tokens=int(usage.get("total_tokens") or 0),
        ),
    )