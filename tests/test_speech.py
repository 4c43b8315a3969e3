import json

import pytest
from starlette.requests import Request

from simpleoneapi.apis.speech import create_speech_handler


def _request(body: bytes) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/v1/audio/speech",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
    }
    sent = False

    async def receive():
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.mark.asyncio
async def test_speech_success():
    body = json.dumps(
        {"model": "tts-1", "input": "hello world", "voice": "alloy", "speed": 1.0}
    ).encode()
    response = await create_speech_handler(_request(body))
    assert response.status_code == 200
    message = json.loads(response.body)["message"]
    assert "'tts-1'" in message
    assert "'alloy'" in message
    assert "'hello world'" in message


@pytest.mark.asyncio
async def test_speech_missing_voice():
    body = json.dumps({"model": "tts-1", "input": "hi"}).encode()
    response = await create_speech_handler(_request(body))
    assert response.status_code == 400
    assert "voice" in json.loads(response.body)["error"]


@pytest.mark.asyncio
async def test_speech_invalid_json():
    response = await create_speech_handler(_request(b"{not json"))
    assert response.status_code == 400
    assert "error" in json.loads(response.body)


@pytest.mark.asyncio
async def test_speech_wrong_speed_type():
    body = json.dumps(
        {"model": "tts-1", "input": "hi", "voice": "alloy", "speed": "fast"}
    ).encode()
    response = await create_speech_handler(_request(body))
    assert response.status_code == 400
    assert "speed" in json.loads(response.body)["error"]