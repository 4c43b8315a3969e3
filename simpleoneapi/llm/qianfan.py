"""Client for the Qianfan (ERNIE) chat API."""

from __future__ import annotations

import json
import logging
from typing import AsyncIterator

import httpx

from simpleoneapi.errors import UpstreamStatusError
from simpleoneapi.llm.qianfan_types import QianFanRequest, QianFanResponse

TOKEN_URL = "https://aip.baidubce.com/oauth/2.0/token"
CHAT_URL = "https://aip.baidubce.com/rpc/2.0/ai_custom/v1/wenxinworkshop/chat/"

_ADDRESSES = {
    "ERNIE-Speed-8K": "ernie_speed",
    "ERNIE-Lite-8K-0922": "eb-instant",
    "Yi-34B-Chat": "yi_34b_chat",
}

_log = logging.getLogger(__name__)


def model_name_to_address(model_name: str) -> str:
    """The endpoint path segment of a model."""
    return _ADDRESSES.get(model_name, model_name.lower())


def _chat_url(access_token: str, model: str) -> str:
    return CHAT_URL + model_name_to_address(model) + "?access_token=" + access_token


def _encode(request: QianFanRequest) -> bytes:
    return json.dumps(request.to_dict(), ensure_ascii=False).encode("utf-8")


async def get_access_token(api_key: str, secret_key: str) -> str:
    """Exchange the key pair for an access token.

    Raises ``RuntimeError`` when no token is returned.
    """
    form = {
        "grant_type": "client_credentials",
        "client_id": api_key,
        "client_secret": secret_key,
    }
    try:
        async with httpx.AsyncClient(timeout=None) as client:
            response = await client.post(TOKEN_URL, data=form)
        body = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        _log.error("%s", exc)
        raise RuntimeError("Failed to get access token") from exc

    if isinstance(body, dict):
        token = body.get("access_token")
        if isinstance(token, str) and token:
            return token
        description = body.get("error_description")
        if isinstance(description, str):
            _log.error("Error in getting access token: %s", description)
            raise RuntimeError(f"Failed to get access token: {description}")
    _log.error("Unknown error in access token response")
    raise RuntimeError("Failed to get access token")


async def send_chat_request(access_token: str, model: str, request: QianFanRequest) -> QianFanResponse:
    """Send a non-streamed chat request."""
    url = _chat_url(access_token, model)
    async with httpx.AsyncClient(timeout=None) as client:
        response = await client.post(
            url, content=_encode(request), headers={"Content-Type": "application/json"}
        )
    if response.status_code != 200:
        _log.error("received non-200 response code: %d body=%s", response.status_code, response.text)
        raise UpstreamStatusError(
            response.status_code,
            response.text,
            f"received non-200 response code: {response.status_code}",
        )
    result = QianFanResponse.from_dict(response.json())
    _log.info("response %s", result)
    return result


async def send_chat_request_with_sse(
    access_token: str, model: str, request: QianFanRequest
) -> AsyncIterator[QianFanResponse]:
    """Send a streamed chat request and yield every decoded event.

    Lines that do not decode are logged and skipped.
    """
    url = _chat_url(access_token, model)
    async with httpx.AsyncClient(timeout=None) as client:
        async with client.stream(
            "POST", url, content=_encode(request), headers={"Content-Type": "application/json"}
        ) as response:
            if response.status_code != 200:
                await response.aread()
                _log.error("received non-200 response code: %d", response.status_code)
                raise UpstreamStatusError(
                    response.status_code,
                    response.text,
                    f"received non-200 response code: {response.status_code}",
                )
            async for line in response.aiter_lines():
                if not line:
                    continue
                data = line.removeprefix("data:")
                _log.debug("%s", data)
                try:
                    event = QianFanResponse.from_dict(json.loads(data))
                except ValueError as exc:
                    _log.error("%s", exc)
                    continue
                yield event


async def qianfan_call(
    api_key: str, secret_key: str, model: str, request: QianFanRequest
) -> QianFanResponse:
    """Authenticate and send a non-streamed chat request."""
    _log.info("QianFanCall model=%s request=%s", model, request)
    access_token = await get_access_token(api_key, secret_key)
    return await send_chat_request(access_token, model, request)


async def qianfan_call_sse(
    api_key: str, secret_key: str, model: str, request: QianFanRequest
) -> AsyncIterator[QianFanResponse]:
    """Authenticate and yield the events of a streamed chat request."""
    _log.info("QianFanCall model=%s request=%s", model, request)
    access_token = await get_access_token(api_key, secret_key)
    async for event in send_chat_request_with_sse(access_token, model, request):
        yield event