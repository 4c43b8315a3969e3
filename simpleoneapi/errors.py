"""Errors raised for failed upstream responses."""

from __future__ import annotations

import logging

import httpx

_log = logging.getLogger(__name__)


class UpstreamStatusError(Exception):
    """An upstream service answered with a status other than 200."""

    def __init__(self, status_code: int, body: str, message: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"status {status_code}: {body}")


def check_status_code(response: httpx.Response) -> None:
    """Raise ``UpstreamStatusError`` unless ``response`` has status 200.

    The error carries the response body; a streamed body that was not read
    yet is read here when possible.
    """
    if response.status_code == 200:
        return None
    try:
        body = response.text
    except httpx.ResponseNotRead:
        try:
            response.read()
            body = response.text
        except (httpx.HTTPError, RuntimeError) as exc:
            _log.error("Failed to read response body: status=%d error=%s", response.status_code, exc)
            raise UpstreamStatusError(
                response.status_code, "", "failed to read error response body"
            ) from exc
    _log.error("Unexpected status code: status=%d body=%s", response.status_code, body)
    raise UpstreamStatusError(response.status_code, body)