import pytest

from simpleoneapi.llm.gemini import (
    ContentEntity,
    GeminiRequest,
    GeminiResponse,
    GenerationConfig,
    Part,
    SafetySetting,
    UsageMetadata,
)


def test_content_round_trip():
    entity = ContentEntity(role="user", parts=[Part("a"), Part("b")])
    assert ContentEntity.from_dict(entity.to_dict()) == entity


def test_generation_config_camel_case_and_omitempty():
    cfg = GenerationConfig(stop_sequences=["x"], temperature=0.5, max_output_tokens=10)
    assert cfg.to_dict() == {"stopSequences": ["x"], "temperature": 0.5, "maxOutputTokens": 10}
    assert GenerationConfig().to_dict() == {}


def test_request_always_has_generation_config():
    data = GeminiRequest(contents=[ContentEntity(role="user", parts=[Part("hi")])]).to_dict()
    assert data["generationConfig"] == {}
    assert "safetySettings" not in data
    assert data["contents"][0]["parts"][0]["text"] == "hi"


def test_request_safety_settings():
    req = GeminiRequest(
        safety_settings=[SafetySetting("HARM_CATEGORY_DANGEROUS_CONTENT", "BLOCK_ONLY_HIGH")]
    )
    assert req.to_dict()["safetySettings"] == [
        {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_ONLY_HIGH"}
    ]


def test_response_from_dict():
    resp = GeminiResponse.from_dict(
        {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": "hello"}]},
                    "finishReason": "STOP",
                    "index": 0,
                    "safetyRatings": [{"category": "c", "probability": "NEGLIGIBLE"}],
                }
            ],
            "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 4, "totalTokenCount": 7},
        }
    )
    assert resp.candidates[0].content.parts[0].text == "hello"
    assert resp.candidates[0].finish_reason == "STOP"
    assert resp.candidates[0].safety_ratings[0].probability == "NEGLIGIBLE"
    assert resp.usage_metadata == UsageMetadata(3, 4, 7)


def test_response_empty():
    resp = GeminiResponse.from_dict({})
    assert resp.candidates == []
    assert resp.usage_metadata == UsageMetadata()


@pytest.mark.parametrize("data", ["x", {"candidates": [{"index": "1"}]}, {"usageMetadata": []}])
def test_response_invalid(data):
    with pytest.raises(ValueError):
        GeminiResponse.from_dict(data)