import pytest

from simpleoneapi.llm.coze import (
    CozeMessage,
    CozeRequest,
    ErrorInformation,
    Response,
    StreamResponse,
)


def test_message_to_dict_omits_empty_type():
    msg = CozeMessage(role="user", content="hi", content_type="text")
    assert msg.to_dict() == {"role": "user", "content": "hi", "content_type": "text"}


def test_message_round_trip():
    msg = CozeMessage(role="assistant", type="answer", content="ok", content_type="text")
    assert CozeMessage.from_dict(msg.to_dict()) == msg


def test_request_to_dict_without_history():
    req = CozeRequest(conversation_id="123", bot_id="bot", user="u", query="q", stream=True)
    data = req.to_dict()
    assert "chat_history" not in data
    assert data["bot_id"] == "bot"
    assert data["stream"] is True


def test_request_to_dict_with_history():
    history = [CozeMessage(role="user", content="a", content_type="text")]
    data = CozeRequest(query="q", chat_history=history).to_dict()
    assert data["chat_history"] == [history[0].to_dict()]


def test_stream_response_from_dict():
    resp = StreamResponse.from_dict(
        {
            "event": "message",
            "message": {"role": "assistant", "type": "answer", "content": "hi", "content_type": "text"},
            "is_finish": False,
            "index": 2,
            "conversation_id": "c1",
        }
    )
    assert resp.event == "message"
    assert resp.message.content == "hi"
    assert resp.index == 2
    assert resp.conversation_id == "c1"
    assert resp.error_information == ErrorInformation()


def test_stream_response_error():
    resp = StreamResponse.from_dict(
        {"event": "error", "error_information": {"code": 4000, "msg": "bad"}}
    )
    assert resp.error_information == ErrorInformation(code=4000, msg="bad")


def test_response_from_dict():
    resp = Response.from_dict(
        {
            "messages": [{"role": "assistant", "type": "answer", "content": "x", "content_type": "text"}],
            "conversation_id": "c",
            "code": 0,
            "msg": "success",
        }
    )
    assert len(resp.messages) == 1
    assert resp.messages[0].type == "answer"
    assert resp.msg == "success"


@pytest.mark.parametrize("data", [[], {"code": "zero"}, {"messages": {}}])
def test_response_invalid(data):
    with pytest.raises(ValueError):
        Response.from_dict(data)