"""Domain models for the provider transport layer.

Requests mirror the provider's wire payloads; responses and stream chunks are
the provider-native shapes the collectors consume.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import Any


def _payload(obj: Any) -> dict[str, Any]:
    """Return dataclass fields as kwargs, leaving out unset (``None``) values."""
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        out[f.name] = value
    return out


# =============================================================================
# Requests
# =============================================================================


@dataclass(frozen=True)
class CompletionRequest:
    """Single-prompt completion payload."""

    model: str
    prompt: str = ""
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    stream: bool = False
    stop: list[str] | None = None
    n: int | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None

    def to_kwargs(self) -> dict[str, Any]:
        return _payload(self)


@dataclass(frozen=True)
class ProviderFunctionCall:
    """Function call as it appears on the wire."""

    name: str = ""
    arguments: str = ""


@dataclass(frozen=True)
class ProviderMessage:
    """One chat message in provider form."""

    role: str
    content: str = ""
    name: str | None = None
    function_call: ProviderFunctionCall | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.name is not None:
            out["name"] = self.name
        if self.function_call is not None:
            out["function_call"] = {
                "name": self.function_call.name,
                "arguments": self.function_call.arguments,
            }
        return out


@dataclass(frozen=True)
class ProviderFunctionDefinition:
    """Function declaration in provider form."""

    name: str
    description: str
    parameters: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }


@dataclass(frozen=True)
class ChatCompletionRequest:
    """Multi-turn chat payload."""

    model: str
    messages: list[ProviderMessage] = field(default_factory=list)
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    stream: bool = False
    stop: list[str] | None = None
    n: int | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    functions: list[ProviderFunctionDefinition] | None = None
    function_call: str | dict[str, str] | None = None

    def to_kwargs(self) -> dict[str, Any]:
        out = _payload(self)
        out["messages"] = [m.to_dict() for m in self.messages]
        if self.functions is not None:
            out["functions"] = [fn.to_dict() for fn in self.functions]
        return out


@dataclass(frozen=True)
class EmbeddingRequest:
    """Batched embeddings payload."""

    model: str
    input: list[str]

    def to_kwargs(self) -> dict[str, Any]:
        return {"model": self.model, "input": list(self.input)}


# =============================================================================
# Responses
# =============================================================================


@dataclass(frozen=True)
class Usage:
    """Token accounting for one non-streaming response."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class CompletionChoice:
    text: str = ""
    finish_reason: str = ""


@dataclass(frozen=True)
class CompletionResponse:
    choices: list[CompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)


@dataclass(frozen=True)
class CompletionChunk:
    """One streamed completion delta; ``usage`` is never present."""

    choices: list[CompletionChoice] = field(default_factory=list)


@dataclass(frozen=True)
class ChatChoice:
    message: ProviderMessage
    finish_reason: str = ""


@dataclass(frozen=True)
class ChatCompletionResponse:
    choices: list[ChatChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)


@dataclass(frozen=True)
class ChatDelta:
    """Incremental part of a streamed chat message."""

    role: str | None = None
    content: str = ""
    function_call: ProviderFunctionCall | None = None


@dataclass(frozen=True)
class ChatChunkChoice:
    delta: ChatDelta = field(default_factory=ChatDelta)
    finish_reason: str = ""


@dataclass(frozen=True)
class ChatCompletionChunk:
    choices: list[ChatChunkChoice] = field(default_factory=list)


@dataclass(frozen=True)
class EmbeddingData:
    """One embedding vector, in the provider's native precision."""

    embedding: Sequence[float]
    index: int = 0


@dataclass(frozen=True)
class EmbeddingResponse:
    data: list[EmbeddingData] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)
