"""Conversions between OpenAI chat payloads and provider payloads."""