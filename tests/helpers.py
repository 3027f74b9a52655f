"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off provider subclasses as coverage expands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from langweave.providers.models import (
    ChatChoice,
    ChatChunkChoice,
    ChatCompletionChunk,
    ChatCompletionResponse,
    ChatDelta,
    CompletionChoice,
    CompletionChunk,
    CompletionResponse,
    ProviderFunctionCall,
    ProviderMessage,
    Usage,
)

Script = list[Any]


@dataclass
class FakeProvider:
    """Provider double that replays scripted results.

    Each ``*_results`` list is consumed one entry per request. An entry that
    is an exception is raised instead of returned. Stream entries are lists of
    chunks; an exception inside the list is raised when the stream reaches it.
    """

    completion_results: Script = field(default_factory=list)
    chat_results: Script = field(default_factory=list)
    completion_streams: Script = field(default_factory=list)
    chat_streams: Script = field(default_factory=list)
    embedding_results: Script = field(default_factory=list)

    requests: list[Any] = field(default_factory=list)
    streams_opened: int = 0
    streams_closed: int = 0

    @staticmethod
    def _next(script: Script) -> Any:
        item = script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def create_completion(self, request: Any) -> Any:
        self.requests.append(request)
        return self._next(self.completion_results)

    async def create_chat_completion(self, request: Any) -> Any:
        self.requests.append(request)
        return self._next(self.chat_results)

    async def create_embeddings(self, request: Any) -> Any:
        self.requests.append(request)
        return self._next(self.embedding_results)

    def create_completion_stream(self, request: Any) -> Any:
        self.requests.append(request)
        return self._stream(self.completion_streams.pop(0))

    def create_chat_completion_stream(self, request: Any) -> Any:
        self.requests.append(request)
        return self._stream(self.chat_streams.pop(0))

    async def _stream(self, chunks: Script) -> Any:
        self.streams_opened += 1
        try:
            for chunk in chunks:
                if isinstance(chunk, BaseException):
                    raise chunk
                yield chunk
        finally:
            self.streams_closed += 1


@dataclass
class RecordingLogger:
    """LLMLogger double recording events in order."""

    events: list[tuple[str, Any]] = field(default_factory=list)

    def llm_request(self, msg: str) -> None:
        self.events.append(("request", msg))

    def llm_response(self, msg: str) -> None:
        self.events.append(("response", msg))

    def llm_error(self, err: BaseException) -> None:
        self.events.append(("error", err))


@dataclass
class CollectingSink:
    """Streaming sink that records fragments and can fail on a given call."""

    fail_on: int | None = None
    error: BaseException = field(default_factory=lambda: RuntimeError("stop"))
    chunks: list[bytes] = field(default_factory=list)

    async def __call__(self, chunk: bytes) -> None:
        self.chunks.append(chunk)
        if self.fail_on is not None and len(self.chunks) == self.fail_on:
            raise self.error


# --- Response builders ---


def usage(prompt: int = 3, completion: int = 5) -> Usage:
    return Usage(
        prompt_tokens=prompt,
        completion_tokens=completion,
        total_tokens=prompt + completion,
    )


def completion_response(text: str, finish_reason: str = "stop", **kw: int) -> CompletionResponse:
    return CompletionResponse(
        choices=[CompletionChoice(text=text, finish_reason=finish_reason)],
        usage=usage(**kw),
    )


def chat_response(
    content: str,
    finish_reason: str = "stop",
    function_call: tuple[str, str] | None = None,
    **kw: int,
) -> ChatCompletionResponse:
    call = ProviderFunctionCall(*function_call) if function_call else None
    return ChatCompletionResponse(
        choices=[
            ChatChoice(
                message=ProviderMessage(role="assistant", content=content, function_call=call),
                finish_reason=finish_reason,
            )
        ],
        usage=usage(**kw),
    )


def completion_chunk(text: str, finish_reason: str = "") -> CompletionChunk:
    return CompletionChunk(choices=[CompletionChoice(text=text, finish_reason=finish_reason)])


def chat_chunk(
    content: str = "",
    finish_reason: str = "",
    function_call: tuple[str, str] | None = None,
) -> ChatCompletionChunk:
    call = ProviderFunctionCall(*function_call) if function_call else None
    return ChatCompletionChunk(
        choices=[
            ChatChunkChoice(
                delta=ChatDelta(content=content, function_call=call),
                finish_reason=finish_reason,
            )
        ]
    )
