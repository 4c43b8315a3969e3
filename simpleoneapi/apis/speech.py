"""A simulated ``/v1/audio/speech`` endpoint."""

from __future__ import annotations

from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse

_REQUIRED = ("model", "input", "voice")


def _validate(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    for name in _REQUIRED:
        value = body.get(name)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"field {name!r} must be a string")
        if not value:
            raise ValueError(f"field {name!r} is required")
    response_format = body.get("response_format")
    if response_format is not None and not isinstance(response_format, str):
        raise ValueError("field 'response_format' must be a string")
    speed = body.get("speed")
    if speed is not None and (isinstance(speed, bool) or not isinstance(speed, (int, float))):
        raise ValueError("field 'speed' must be a number")
    return body


async def create_speech_handler(request: Request) -> JSONResponse:
    """Answer with a description of the audio that would be generated."""
    try:
        body = _validate(await request.json())
    except ValueError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    message = (
        f"模拟响应：使用模型 '{body['model']}' 和声音 '{body['voice']}' 生成音频。"
        f"文本内容为 '{body['input']}'。"
    )
    return JSONResponse({"message": message})