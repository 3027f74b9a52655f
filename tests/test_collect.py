"""Whole-response collection into Generations."""

from __future__ import annotations

import pytest

from langweave.collect import collect_chat, collect_completion
from langweave.errors import EmptyResponseError
from langweave.messages import FunctionCall
from langweave.providers.models import ChatCompletionResponse, CompletionResponse
from tests.helpers import chat_response, completion_response

pytestmark = pytest.mark.unit


def test_completion_usage_is_copied_verbatim() -> None:
    gen = collect_completion(completion_response("hello", prompt=7, completion=2))

    assert gen.text == "hello"
    assert gen.message is None
    assert gen.generation_info == {
        "prompt_tokens": 7,
        "completion_tokens": 2,
        "total_tokens": 9,
        "finish_reason": "stop",
    }


def test_chat_reply_becomes_ai_message() -> None:
    gen = collect_chat(chat_response("hi there", finish_reason="length"))

    assert gen.text == "hi there"
    assert gen.message is not None
    assert gen.message.content == "hi there"
    assert gen.finish_reason == "length"
    assert gen.function_call is None


def test_chat_function_call_is_attached_on_function_call_finish() -> None:
    gen = collect_chat(
        chat_response(
            "",
            finish_reason="function_call",
            function_call=("get_weather", '{"location": "Oslo"}'),
        )
    )

    assert gen.function_call == FunctionCall(
        name="get_weather", arguments='{"location": "Oslo"}'
    )


def test_chat_function_call_is_ignored_for_other_finish_reasons() -> None:
    gen = collect_chat(
        chat_response("text", finish_reason="stop", function_call=("f", "{}"))
    )
    assert gen.function_call is None


@pytest.mark.parametrize(
    ("collect", "empty"),
    [
        (collect_completion, CompletionResponse()),
        (collect_chat, ChatCompletionResponse()),
    ],
)
def test_no_choices_is_an_empty_response(collect, empty) -> None:
    with pytest.raises(EmptyResponseError, match="no response"):
        collect(empty)
