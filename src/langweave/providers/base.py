"""Provider protocol: the minimal completion-provider capability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from langweave.providers.models import (
        ChatCompletionChunk,
        ChatCompletionRequest,
        ChatCompletionResponse,
        CompletionChunk,
        CompletionRequest,
        CompletionResponse,
        EmbeddingRequest,
        EmbeddingResponse,
    )


@runtime_checkable
class CompletionProvider(Protocol):
    """Issue completion, chat and embedding requests against a remote model.

    Stream operations return an async iterator of deltas. Exhaustion of the
    iterator is the end-of-stream signal; any exception raised while iterating
    is a provider error. The iterator must release its transport connection
    when closed with ``aclose()``.

    Implementations are read-only after construction and may be shared by
    concurrently running calls.
    """

    async def create_completion(
        self, request: CompletionRequest
    ) -> CompletionResponse:
        """Issue one completion request."""
        ...

    def create_completion_stream(
        self, request: CompletionRequest
    ) -> AsyncIterator[CompletionChunk]:
        """Open a completion stream."""
        ...

    async def create_chat_completion(
        self, request: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        """Issue one chat completion request."""
        ...

    def create_chat_completion_stream(
        self, request: ChatCompletionRequest
    ) -> AsyncIterator[ChatCompletionChunk]:
        """Open a chat completion stream."""
        ...

    async def create_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Embed a batch of texts."""
        ...
