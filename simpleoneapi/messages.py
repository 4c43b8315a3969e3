"""Helpers for rewriting chat message histories."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from simpleoneapi.schema import Message


def convert_system_messages_to_no_system(messages: Sequence[Message]) -> list[Message]:
    """Fold a leading system message into the following message.

    A lone system message becomes a user message; otherwise its content is
    prepended, followed by a newline, to the next message. The input is not
    modified.
    """
    result = list(messages)
    if not result or result[0].role.lower() != "system":
        return result
    if len(result) == 1:
        return [replace(result[0], role="user")]
    system_query = result[0].content
    rest = result[1:]
    rest[0] = replace(rest[0], content=system_query + "\n" + rest[0].content)
    return rest