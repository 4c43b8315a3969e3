import pytest

from simpleoneapi.llm.minimax import (
    BaseResp,
    BotSetting,
    MinimaxMessage,
    MinimaxRequest,
    MinimaxResponse,
    MinimaxUsage,
    ReplyConstraints,
)


def test_request_to_dict():
    req = MinimaxRequest(
        model="abab6.5",
        stream=True,
        tokens_to_generate=8192,
        messages=[MinimaxMessage("USER", "USER", "hi")],
        bot_setting=[BotSetting("BOT", "persona")],
        reply_constraints=ReplyConstraints("BOT", "BOT"),
    )
    data = req.to_dict()
    assert data["model"] == "abab6.5"
    assert data["stream"] is True
    assert data["tokens_to_generate"] == 8192
    assert data["messages"] == [{"sender_type": "USER", "sender_name": "USER", "text": "hi"}]
    assert data["bot_setting"] == [{"bot_name": "BOT", "content": "persona"}]
    assert data["reply_constraints"] == {"sender_type": "BOT", "sender_name": "BOT"}


def test_request_omits_zero_options():
    data = MinimaxRequest(model="m").to_dict()
    for key in ("stream", "tokens_to_generate", "temperature", "top_p", "mask_sensitive_info"):
        assert key not in data
    assert data["messages"] == []
    assert data["bot_setting"] == []


def test_response_from_dict():
    resp = MinimaxResponse.from_dict(
        {
            "created": 1689738160,
            "model": "abab5.5-chat",
            "reply": "hello",
            "choices": [
                {
                    "messages": [{"sender_type": "BOT", "sender_name": "BOT", "text": "hello"}],
                    "index": 0,
                    "finish_reason": "stop",
                }
            ],
            "usage": {"total_tokens": 149},
            "id": "abc",
            "base_resp": {"status_code": 0, "status_msg": "success"},
        }
    )
    assert resp.created == 1689738160
    assert resp.choices[0].messages[0].text == "hello"
    assert resp.choices[0].finish_reason == "stop"
    assert resp.usage == MinimaxUsage(total_tokens=149)
    assert resp.base_resp == BaseResp(status_code=0, status_msg="success")
    assert resp.id == "abc"


def test_response_error_status():
    resp = MinimaxResponse.from_dict({"base_resp": {"status_code": 1004, "status_msg": "auth"}})
    assert resp.base_resp.status_code == 1004
    assert resp.choices == []


@pytest.mark.parametrize("data", [[], {"created": "now"}, {"choices": [{"messages": "x"}]}])
def test_response_invalid(data):
    with pytest.raises(ValueError):
        MinimaxResponse.from_dict(data)