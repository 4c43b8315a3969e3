from simpleoneapi.messages import convert_system_messages_to_no_system
from simpleoneapi.schema import Message


def test_empty_list():
    assert convert_system_messages_to_no_system([]) == []


def test_single_system_becomes_user():
    result = convert_system_messages_to_no_system([Message(role="system", content="rules")])
    assert result == [Message(role="user", content="rules")]


def test_system_is_merged_into_next():
    msgs = [Message("system", "sys"), Message("user", "hello"), Message("assistant", "hi")]
    result = convert_system_messages_to_no_system(msgs)
    assert len(result) == len(msgs) - 1
    assert result[0] == Message("user", "sys\nhello")
    assert result[1] == msgs[2]


def test_uppercase_system_role():
    msgs = [Message("SYSTEM", "s"), Message("user", "u")]
    result = convert_system_messages_to_no_system(msgs)
    assert [m.role for m in result] == ["user"]
    assert result[0].content.startswith("s\n")


def test_no_system_unchanged():
    msgs = [Message("user", "a"), Message("system", "b")]
    assert convert_system_messages_to_no_system(msgs) == msgs


def test_input_not_mutated():
    msgs = [Message("system", "sys"), Message("user", "hello")]
    convert_system_messages_to_no_system(msgs)
    assert msgs == [Message("system", "sys"), Message("user", "hello")]