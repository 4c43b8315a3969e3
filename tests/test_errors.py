import httpx
import pytest

from simpleoneapi.errors import UpstreamStatusError, check_status_code


class _AsyncOnlyStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        yield b"unreachable"


def test_ok_status_passes():
    assert check_status_code(httpx.Response(200, text="fine")) is None


def test_error_status_raises_with_body():
    with pytest.raises(UpstreamStatusError) as info:
        check_status_code(httpx.Response(404, text="nope"))
    assert info.value.status_code == 404
    assert info.value.body == "nope"
    assert str(info.value) == "status 404: nope"


def test_other_success_codes_are_errors_too():
    with pytest.raises(UpstreamStatusError) as info:
        check_status_code(httpx.Response(201, text="made"))
    assert info.value.status_code == 201


def test_unread_sync_stream_is_read():
    response = httpx.Response(500, stream=httpx.ByteStream(b"boom"))
    with pytest.raises(UpstreamStatusError) as info:
        check_status_code(response)
    assert info.value.body == "boom"


def test_unreadable_body():
    response = httpx.Response(502, stream=_AsyncOnlyStream())
    with pytest.raises(UpstreamStatusError) as info:
        check_status_code(response)
    assert str(info.value) == "failed to read error response body"
    assert info.value.status_code == 502