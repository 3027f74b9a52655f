"""Request building: options to provider payloads."""

from __future__ import annotations

import pytest

from langweave.messages import (
    AIChatMessage,
    FunctionCall,
    FunctionChatMessage,
    GenericChatMessage,
    HumanChatMessage,
    SystemChatMessage,
)
from langweave.options import CallOptions, FunctionDefinition
from langweave.providers.models import ProviderFunctionCall
from langweave.request import (
    DEFAULT_CHAT_MAX_TOKENS,
    CallKind,
    build_chat_request,
    build_completion_request,
    build_embedding_request,
    resolve_model,
    translate_messages,
)

pytestmark = pytest.mark.unit


async def _sink(chunk: bytes) -> None:
    del chunk


def test_model_precedence() -> None:
    assert resolve_model(CallKind.CHAT, "override", "instance") == "override"
    assert resolve_model(CallKind.CHAT, None, "instance") == "instance"
    assert resolve_model(CallKind.CHAT) == "gpt-3.5-turbo"
    assert resolve_model(CallKind.COMPLETION) == "gpt-3.5-turbo-instruct"
    assert resolve_model(CallKind.EMBEDDING) == "text-embedding-ada-002"


def test_completion_request_maps_every_option() -> None:
    opts = CallOptions(
        max_tokens=64,
        temperature=0.3,
        top_p=0.9,
        stop_words=("END",),
        n=2,
        frequency_penalty=0.1,
        presence_penalty=0.2,
        streaming_func=_sink,
    )

    request = build_completion_request(opts, model="m")

    assert request.to_kwargs() == {
        "model": "m",
        "prompt": "",
        "max_tokens": 64,
        "temperature": 0.3,
        "top_p": 0.9,
        "stream": True,
        "stop": ["END"],
        "n": 2,
        "frequency_penalty": 0.1,
        "presence_penalty": 0.2,
    }


def test_unset_options_are_omitted_from_payload() -> None:
    request = build_completion_request(CallOptions(), model="m")
    assert request.to_kwargs() == {"model": "m", "prompt": "", "stream": False}


def test_chat_request_defaults_max_tokens_and_omits_functions() -> None:
    kwargs = build_chat_request(CallOptions(), model="m").to_kwargs()

    assert kwargs["max_tokens"] == DEFAULT_CHAT_MAX_TOKENS
    assert kwargs["stream"] is False
    assert "functions" not in kwargs
    assert "function_call" not in kwargs


def test_chat_request_declares_functions_with_auto_selection() -> None:
    opts = CallOptions(
        functions=(
            FunctionDefinition(
                name="get_weather",
                description="Look up the weather",
                parameters={"type": "object", "properties": {"city": {"type": "string"}}},
            ),
            FunctionDefinition(name="noop"),
        )
    )

    kwargs = build_chat_request(opts, model="m").to_kwargs()

    assert [f["name"] for f in kwargs["functions"]] == ["get_weather", "noop"]
    assert kwargs["functions"][0]["description"] == "Look up the weather"
    assert kwargs["functions"][0]["parameters"]["properties"] == {"city": {"type": "string"}}
    assert kwargs["function_call"] == "auto"


def test_chat_request_keeps_explicit_function_call_behavior() -> None:
    opts = CallOptions(functions=(FunctionDefinition(name="f"),), function_call="none")
    assert build_chat_request(opts, model="m").function_call == "none"


def test_translate_messages_uses_fixed_role_table() -> None:
    messages = [
        SystemChatMessage("be brief"),
        HumanChatMessage("hi"),
        AIChatMessage("hello"),
        GenericChatMessage("aside", role="narrator"),
        FunctionChatMessage('{"temp": 21}', name="get_weather"),
    ]

    translated = translate_messages(messages)

    assert [m.role for m in translated] == ["system", "user", "assistant", "user", "function"]
    assert [m.content for m in translated] == ["be brief", "hi", "hello", "aside", '{"temp": 21}']
    assert translated[4].name == "get_weather"
    assert all(m.function_call is None for m in translated)


def test_ai_message_function_call_is_carried_over() -> None:
    msg = AIChatMessage("", function_call=FunctionCall(name="f", arguments='{"x": 1}'))

    (translated,) = translate_messages([msg])

    assert translated.function_call == ProviderFunctionCall(name="f", arguments='{"x": 1}')
    assert translated.to_dict() == {
        "role": "assistant",
        "content": "",
        "function_call": {"name": "f", "arguments": '{"x": 1}'},
    }


def test_translate_messages_rejects_non_messages() -> None:
    with pytest.raises(TypeError):
        translate_messages([{"role": "user", "content": "raw dict"}])  # type: ignore[list-item]


def test_embedding_request_batches_all_texts() -> None:
    request = build_embedding_request("text-embedding-ada-002", ("a", "b"))
    assert request.to_kwargs() == {"model": "text-embedding-ada-002", "input": ["a", "b"]}
