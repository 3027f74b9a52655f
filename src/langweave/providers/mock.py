"""Mock provider for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from langweave.providers.models import (
    ChatChoice,
    ChatChunkChoice,
    ChatCompletionChunk,
    ChatCompletionResponse,
    ChatDelta,
    CompletionChoice,
    CompletionChunk,
    CompletionResponse,
    EmbeddingData,
    EmbeddingResponse,
    ProviderMessage,
    Usage,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from langweave.providers.models import (
        ChatCompletionRequest,
        CompletionRequest,
        EmbeddingRequest,
    )

_EMBEDDING_DIMENSIONS = 8


class MockProvider:
    """Mock provider for running without API calls.

    Echoes the prompt (or the last chat message) back. Streams split the echo
    on whitespace so sinks see several fragments.
    """

    name = "mock"

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Return a deterministic echo of the prompt."""
        text = _echo(request.prompt)
        return CompletionResponse(
            choices=[CompletionChoice(text=text, finish_reason="stop")],
            usage=_usage(request.prompt, text),
        )

    async def create_completion_stream(
        self, request: CompletionRequest
    ) -> AsyncIterator[CompletionChunk]:
        """Stream the echo word by word."""
        pieces = _split(_echo(request.prompt))
        for i, piece in enumerate(pieces):
            finish = "stop" if i == len(pieces) - 1 else ""
            yield CompletionChunk(choices=[CompletionChoice(text=piece, finish_reason=finish)])

    async def create_chat_completion(
        self, request: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        """Return a deterministic echo of the last message."""
        prompt = request.messages[-1].content if request.messages else ""
        text = _echo(prompt)
        return ChatCompletionResponse(
            choices=[
                ChatChoice(
                    message=ProviderMessage(role="assistant", content=text),
                    finish_reason="stop",
                )
            ],
            usage=_usage(prompt, text),
        )

    async def create_chat_completion_stream(
        self, request: ChatCompletionRequest
    ) -> AsyncIterator[ChatCompletionChunk]:
        """Stream the echo word by word, starting with a role-only delta."""
        prompt = request.messages[-1].content if request.messages else ""
        yield ChatCompletionChunk(choices=[ChatChunkChoice(delta=ChatDelta(role="assistant"))])
        pieces = _split(_echo(prompt))
        for i, piece in enumerate(pieces):
            finish = "stop" if i == len(pieces) - 1 else ""
            yield ChatCompletionChunk(
                choices=[ChatChunkChoice(delta=ChatDelta(content=piece), finish_reason=finish)]
            )

    async def create_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Return small deterministic vectors derived from each text."""
        data = [
            EmbeddingData(embedding=_vector(text), index=i)
            for i, text in enumerate(request.input)
        ]
        return EmbeddingResponse(data=data)


def _echo(prompt: str) -> str:
    return f"echo: {prompt[:100]}"


def _split(text: str) -> list[str]:
    words = text.split(" ")
    return [w if i == 0 else f" {w}" for i, w in enumerate(words)]


def _usage(prompt: str, text: str) -> Usage:
    prompt_tokens = len(prompt.split())
    completion_tokens = len(text.split())
    return Usage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
    )


def _vector(text: str) -> list[float]:
    codes = [ord(ch) for ch in text] or [0]
    return [
        float(sum(codes[i::_EMBEDDING_DIMENSIONS]) % 97) / 97.0
        for i in range(_EMBEDDING_DIMENSIONS)
    ]
