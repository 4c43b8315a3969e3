"""Path, time, event-stream and header helpers."""

from __future__ import annotations

import json
import os
import re
from datetime import datetime, timedelta, timezone
from typing import Any

_RFC3339 = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def get_absolute_path(path: str) -> str:
    """Return the absolute, normalised form of ``path``."""
    return os.path.abspath(path)


def resolve_relative_path_to_absolute(filename: str) -> str:
    """Return ``filename`` unchanged if absolute, else joined to the working directory."""
    if os.path.isabs(filename):
        return filename
    return os.path.normpath(os.path.join(os.getcwd(), filename))


def parse_rfc3339nano_to_unix_time(value: str) -> int:
    """Parse an RFC 3339 timestamp (any fraction precision) into Unix seconds."""
    match = _RFC3339.match(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    year, month, day, hour, minute, second = (int(match.group(i)) for i in range(1, 7))
    zone = match.group(8)
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"invalid time zone offset: {zone!r}")
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    moment = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    return int(moment.timestamp())


def event_stream_headers() -> dict[str, str]:
    """Headers sent with a server-sent event stream."""
    return {
        "Content-Type": "text/event-stream",
        "Cache-Control": "no-cache",
        "Connection": "keep-alive",
        "Transfer-Encoding": "chunked",
        "X-Accel-Buffering": "no",
    }


def sse_data(payload: Any) -> str:
    """Format one ``data:`` event; non-string payloads are encoded as compact JSON."""
    if isinstance(payload, bytes):
        text = payload.decode("utf-8")
    elif isinstance(payload, str):
        text = payload
    else:
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return "data: " + text + "\n\n"


def api_key_from_header(header: str | None) -> str:
    """Extract the key from an ``Authorization: Bearer <key>`` header value."""
    if not header:
        raise ValueError("invalid authorization header format")
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise ValueError("authorization header not found")
    return parts[1]