"""Request building: map call options to provider payloads.

Pure functions with no I/O. One builder per call kind; the orchestrator fills
in the per-item prompt or messages.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from langweave.messages import AIChatMessage, ChatMessageType, FunctionChatMessage
from langweave.providers.models import (
    ChatCompletionRequest,
    CompletionRequest,
    EmbeddingRequest,
    ProviderFunctionCall,
    ProviderFunctionDefinition,
    ProviderMessage,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from langweave.messages import ChatMessage
    from langweave.options import CallOptions


class CallKind(Enum):
    """The shape of a model call; each kind has its own default model."""

    COMPLETION = "completion"
    CHAT = "chat"
    EMBEDDING = "embedding"

    @property
    def default_model(self) -> str:
        return _DEFAULT_MODELS[self]


_DEFAULT_MODELS: dict[CallKind, str] = {
    CallKind.COMPLETION: "gpt-3.5-turbo-instruct",
    CallKind.CHAT: "gpt-3.5-turbo",
    CallKind.EMBEDDING: "text-embedding-ada-002",
}

#: Chat requests fall back to this when the caller sets no max_tokens.
DEFAULT_CHAT_MAX_TOKENS = 1024

FUNCTION_CALL_BEHAVIOR_AUTO = "auto"

_ROLES: dict[ChatMessageType, str] = {
    ChatMessageType.SYSTEM: "system",
    ChatMessageType.AI: "assistant",
    ChatMessageType.HUMAN: "user",
    ChatMessageType.GENERIC: "user",
    ChatMessageType.FUNCTION: "function",
}


def resolve_model(
    kind: CallKind,
    override: str | None = None,
    instance_default: str | None = None,
) -> str:
    """Pick the model: per-call override, then instance default, then kind default."""
    return override or instance_default or kind.default_model


def build_completion_request(options: CallOptions, *, model: str) -> CompletionRequest:
    """Build the completion payload shared by every prompt of one call."""
    return CompletionRequest(
        model=model,
        max_tokens=options.max_tokens,
        temperature=options.temperature,
        top_p=options.top_p,
        stream=options.streaming,
        stop=list(options.stop_words) if options.stop_words else None,
        n=options.n,
        frequency_penalty=options.frequency_penalty,
        presence_penalty=options.presence_penalty,
    )


def build_chat_request(options: CallOptions, *, model: str) -> ChatCompletionRequest:
    """Build the chat payload shared by every message set of one call."""
    functions: list[ProviderFunctionDefinition] | None = None
    function_call = None
    if options.functions:
        functions = [
            ProviderFunctionDefinition(
                name=fn.name,
                description=fn.description,
                parameters=fn.parameters_json(),
            )
            for fn in options.functions
        ]
        function_call = options.function_call or FUNCTION_CALL_BEHAVIOR_AUTO

    return ChatCompletionRequest(
        model=model,
        max_tokens=options.max_tokens or DEFAULT_CHAT_MAX_TOKENS,
        temperature=options.temperature,
        top_p=options.top_p,
        stream=options.streaming,
        stop=list(options.stop_words) if options.stop_words else None,
        n=options.n,
        frequency_penalty=options.frequency_penalty,
        presence_penalty=options.presence_penalty,
        functions=functions,
        function_call=function_call,
    )


def translate_messages(messages: Iterable[ChatMessage]) -> list[ProviderMessage]:
    """Convert chat messages to provider messages using the fixed role table.

    Raises:
        TypeError: If an item is not a chat message.
    """
    out: list[ProviderMessage] = []
    for m in messages:
        typ = getattr(m, "type", None)
        if typ not in _ROLES:
            raise TypeError(f"Expected a chat message, got {type(m).__name__}")
        function_call = None
        name = None
        if isinstance(m, AIChatMessage) and m.function_call is not None:
            function_call = ProviderFunctionCall(
                name=m.function_call.name,
                arguments=m.function_call.arguments,
            )
        if isinstance(m, FunctionChatMessage):
            name = m.name
        out.append(
            ProviderMessage(
                role=_ROLES[typ],
                content=m.content,
                name=name,
                function_call=function_call,
            )
        )
    return out


def build_embedding_request(model: str, texts: Iterable[str]) -> EmbeddingRequest:
    """Build one batched embeddings payload."""
    return EmbeddingRequest(model=model, input=list(texts))
