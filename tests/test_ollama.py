import pytest

from simpleoneapi.llm.ollama import (
    AdvancedModelOptions,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    OllamaMessage,
)


def test_options_omit_zero_values():
    assert AdvancedModelOptions().to_dict() == {}
    opts = AdvancedModelOptions(temperature=0.7, num_predict=50, top_p=0.9)
    assert opts.to_dict() == {"temperature": 0.7, "num_predict": 50, "top_p": 0.9}


def test_request_to_dict():
    req = ChatRequest(
        model="llama3",
        messages=[OllamaMessage(role="user", content="hi")],
        stream=True,
        format="json",
    )
    data = req.to_dict()
    assert data["model"] == "llama3"
    assert data["messages"] == [{"role": "user", "content": "hi"}]
    assert data["stream"] is True
    assert data["format"] == "json"
    assert data["options"] == {}
    assert "keep_alive" not in data


def test_request_keeps_false_stream():
    data = ChatRequest(model="m").to_dict()
    assert data["stream"] is False
    assert "format" not in data


def test_response_from_dict():
    resp = ChatResponse.from_dict(
        {
            "model": "llama3",
            "created_at": "2023-08-04T19:22:45.499127Z",
            "message": {"role": "assistant", "content": "hello"},
            "done": True,
            "prompt_eval_count": 26,
            "eval_count": 298,
        }
    )
    assert resp.model == "llama3"
    assert resp.created_at == "2023-08-04T19:22:45.499127Z"
    assert resp.message == ChatMessage(role="assistant", content="hello")
    assert resp.done is True
    assert resp.prompt_eval_count == 26
    assert resp.eval_count == 298
    assert resp.total_duration == 0


@pytest.mark.parametrize("data", [None, {"done": "yes"}, {"message": "text"}])
def test_response_invalid(data):
    with pytest.raises(ValueError):
        ChatResponse.from_dict(data)