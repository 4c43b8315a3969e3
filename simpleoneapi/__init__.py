"""OpenAI-style chat types, provider converters and helpers for a chat-model gateway."""

__version__ = "0.1.0"