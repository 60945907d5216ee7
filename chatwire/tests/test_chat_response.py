"""Response envelope decoding."""
from __future__ import annotations

import pytest

from chatwire.base.errors import DecodeError
from chatwire.base.models import ChatCompletionResponse, FinishReason, Parts, Usage, image_part, text_part


def test_decode_basic_response(make_body):
    resp = ChatCompletionResponse.from_dict(make_body(), headers={"x-request-id": "req-1"})
    assert resp.id == "chatcmpl-123"
    assert resp.object == "chat.completion"
    assert resp.created == 1700000000
    assert resp.usage == Usage(prompt_tokens=9, completion_tokens=12, total_tokens=21)
    assert resp.headers == {"x-request-id": "req-1"}
    choice = resp.choices[0]
    assert choice.finish_reason is FinishReason.STOP
    assert choice.message.content == "Hello!"
    assert resp.first_message().parts == Parts([text_part("Hello!")])


def test_decode_array_content_in_choice(make_body):
    body = make_body(
        content=[{"type": "text", "text": "see"}, {"type": "image_url", "image_url": "http://x/i.png"}]
    )
    msg = ChatCompletionResponse.from_dict(body).first_message()
    assert msg.content == ""
    assert msg.parts == Parts([text_part("see"), image_part("http://x/i.png")])


def test_finish_reasons_null_and_unknown(make_body):
    body = make_body(finish_reason=None)
    body["choices"].append(
        {"index": 1, "message": {"role": "assistant", "content": "x"}, "finish_reason": "brand_new_reason"}
    )
    body["choices"].append({"index": 2, "message": {"role": "assistant", "content": "y"}, "finish_reason": "null"})
    resp = ChatCompletionResponse.from_dict(body)
    assert resp.choices[0].finish_reason is None
    assert resp.choices[1].finish_reason == "brand_new_reason"
    assert resp.finish_reasons() == [None, "brand_new_reason", None]


def test_decode_content_filter_annotations(make_body):
    body = make_body()
    body["prompt_filter_results"] = [
        {
            "prompt_index": 0,
            "content_filter_results": {"hate": {"filtered": False, "severity": "safe"}},
        }
    ]
    body["choices"][0]["content_filter_results"] = {"violence": {"filtered": True, "severity": "high"}}
    resp = ChatCompletionResponse.from_dict(body)
    assert resp.prompt_annotations[0].content_filter_results.hate.severity == "safe"
    assert resp.choices[0].content_filter_results.violence.filtered is True


def test_empty_response_object_uses_defaults():
    resp = ChatCompletionResponse.from_dict({})
    assert resp.choices == []
    assert resp.first_message() is None
    assert resp.usage.total_tokens == 0


@pytest.mark.parametrize(
    "mutate",
    [
        lambda b: b["choices"][0]["message"].update(content=12),
        lambda b: b["choices"][0]["message"].pop("role"),
        lambda b: b.update(choices="nope"),
        lambda b: b["usage"].update(total_tokens="many"),
    ],
)
def test_shape_errors_raise_decode_error(make_body, mutate):
    body = make_body()
    mutate(body)
    with pytest.raises(DecodeError):
        ChatCompletionResponse.from_dict(body)


def test_non_object_body_raises_decode_error():
    with pytest.raises(DecodeError):
        ChatCompletionResponse.from_dict(["not", "a", "response"])
