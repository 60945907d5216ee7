"""Request envelope serialization."""
from __future__ import annotations

import pytest

from chatwire.base.errors import InvalidMessageError
from chatwire.base.models import (
    ChatCompletionRequest,
    ChatMessage,
    FunctionDefinition,
    ResponseFormat,
    ResponseFormatType,
    Tool,
    ToolChoice,
    image_part,
    system,
    text_part,
    user,
)


def test_minimal_request_body():
    req = ChatCompletionRequest(model="gpt-4o-mini", messages=[system("be brief"), user("hi")])
    assert req.to_dict() == {
        "model": "gpt-4o-mini",
        "messages": [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hi"},
        ],
    }


def test_unset_fields_are_omitted_and_zeros_are_sent():
    req = ChatCompletionRequest(model="m", messages=[user("x")], temperature=0.0, max_tokens=16)
    body = req.to_dict()
    assert body["temperature"] == 0.0
    assert body["max_tokens"] == 16
    for key in ("top_p", "n", "stop", "stream", "tools", "tool_choice", "seed", "user", "logit_bias"):
        assert key not in body


def test_full_request_body():
    weather = FunctionDefinition(
        name="get_weather",
        description="Current weather",
        parameters={"type": "object", "properties": {"city": {"type": "string"}}},
    )
    req = ChatCompletionRequest(
        model="m",
        messages=[user(parts=[text_part("what is this?"), image_part("https://example.invalid/x.png")])],
        stop=["\n\n"],
        seed=7,
        logit_bias={"50256": -100},
        response_format=ResponseFormat(ResponseFormatType.JSON_OBJECT),
        tools=[Tool(function=weather)],
        tool_choice=ToolChoice("get_weather"),
    )
    body = req.to_dict()
    assert body["messages"][0]["content"][1] == {"type": "image_url", "image_url": "https://example.invalid/x.png"}
    assert body["stop"] == ["\n\n"]
    assert body["seed"] == 7
    assert body["logit_bias"] == {"50256": -100}
    assert body["response_format"] == {"type": "json_object"}
    assert body["tools"] == [
        {
            "type": "function",
            "function": {
                "name": "get_weather",
                "description": "Current weather",
                "parameters": {"type": "object", "properties": {"city": {"type": "string"}}},
            },
        }
    ]
    assert body["tool_choice"] == {"type": "function", "function": {"name": "get_weather"}}


def test_string_tool_choice_and_legacy_functions():
    req = ChatCompletionRequest(
        model="m",
        messages=[user("x")],
        functions=[FunctionDefinition(name="noop")],
        function_call="auto",
        tool_choice="none",
    )
    body = req.to_dict()
    assert body["functions"] == [{"name": "noop", "parameters": None}]
    assert body["function_call"] == "auto"
    assert body["tool_choice"] == "none"


def test_conflicting_message_aborts_whole_body():
    req = ChatCompletionRequest(
        model="m",
        messages=[user("ok"), ChatMessage(role="user", content="a", parts=[text_part("b")])],
    )
    with pytest.raises(InvalidMessageError):
        req.to_dict()
