"""OpenAI provider implementation (Completions, Chat Completions, Embeddings)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Literal

from langweave.errors import APIError
from langweave.providers._errors import wrap_provider_error
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
    ProviderFunctionCall,
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

APIType = Literal["openai", "azure"]

#: API version used for Azure deployments when none is configured.
DEFAULT_AZURE_API_VERSION = "2023-05-15"


class OpenAIProvider:
    """OpenAI (or Azure OpenAI) provider over the async SDK client."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        organization: str | None = None,
        api_type: APIType = "openai",
        api_version: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize with an API key; the SDK client is created lazily."""
        self.api_key = api_key
        self.base_url = base_url
        self.organization = organization
        self.api_type: APIType = api_type
        self.api_version = api_version
        self._client: Any = client

    @property
    def name(self) -> str:
        return self.api_type

    def _get_client(self) -> Any:
        """Lazily initialize and return the OpenAI client."""
        if self._client is None:
            try:
                from openai import AsyncAzureOpenAI, AsyncOpenAI
            except ImportError as e:
                raise APIError(
                    "openai package not installed",
                    hint="pip install openai",
                ) from e
            if self.api_type == "azure":
                self._client = AsyncAzureOpenAI(
                    api_key=self.api_key,
                    azure_endpoint=self.base_url or "",
                    api_version=self.api_version or DEFAULT_AZURE_API_VERSION,
                    organization=self.organization,
                )
            else:
                self._client = AsyncOpenAI(
                    api_key=self.api_key,
                    base_url=self.base_url or None,
                    organization=self.organization,
                )
        return self._client

    def _wrap(self, exc: BaseException, phase: str) -> APIError:
        return wrap_provider_error(
            exc,
            provider=self.name,
            phase=phase,
            message=f"OpenAI {phase} failed",
        )

    async def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Issue one request against the legacy completions endpoint."""
        client = self._get_client()
        kwargs = request.to_kwargs()
        kwargs["stream"] = False
        try:
            response = await client.completions.create(**kwargs)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "completion") from e
        return CompletionResponse(
            choices=[_completion_choice(c) for c in getattr(response, "choices", None) or []],
            usage=_usage(getattr(response, "usage", None)),
        )

    async def create_completion_stream(
        self, request: CompletionRequest
    ) -> AsyncIterator[CompletionChunk]:
        """Stream completion deltas; the SDK stream is closed on exit."""
        client = self._get_client()
        kwargs = request.to_kwargs()
        kwargs["stream"] = True
        try:
            stream = await client.completions.create(**kwargs)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "completion stream") from e
        try:
            async for chunk in stream:
                yield CompletionChunk(
                    choices=[
                        _completion_choice(c) for c in getattr(chunk, "choices", None) or []
                    ]
                )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "completion stream") from e
        finally:
            await stream.close()

    async def create_chat_completion(
        self, request: ChatCompletionRequest
    ) -> ChatCompletionResponse:
        """Issue one chat completion request."""
        client = self._get_client()
        kwargs = request.to_kwargs()
        kwargs["stream"] = False
        try:
            response = await client.chat.completions.create(**kwargs)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "chat completion") from e

        choices: list[ChatChoice] = []
        for c in getattr(response, "choices", None) or []:
            msg = getattr(c, "message", None)
            choices.append(
                ChatChoice(
                    message=ProviderMessage(
                        role=str(getattr(msg, "role", None) or "assistant"),
                        content=str(getattr(msg, "content", None) or ""),
                        function_call=_function_call(getattr(msg, "function_call", None)),
                    ),
                    finish_reason=str(getattr(c, "finish_reason", None) or ""),
                )
            )
        return ChatCompletionResponse(
            choices=choices,
            usage=_usage(getattr(response, "usage", None)),
        )

    async def create_chat_completion_stream(
        self, request: ChatCompletionRequest
    ) -> AsyncIterator[ChatCompletionChunk]:
        """Stream chat deltas; the SDK stream is closed on exit."""
        client = self._get_client()
        kwargs = request.to_kwargs()
        kwargs["stream"] = True
        try:
            stream = await client.chat.completions.create(**kwargs)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "chat completion stream") from e
        try:
            async for chunk in stream:
                yield ChatCompletionChunk(
                    choices=[_chat_chunk_choice(c) for c in getattr(chunk, "choices", None) or []]
                )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "chat completion stream") from e
        finally:
            await stream.close()

    async def create_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        """Embed all input texts in one request."""
        client = self._get_client()
        try:
            response = await client.embeddings.create(**request.to_kwargs())
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise self._wrap(e, "embeddings") from e

        data = [
            EmbeddingData(
                embedding=list(getattr(item, "embedding", None) or []),
                index=int(getattr(item, "index", i) or 0),
            )
            for i, item in enumerate(getattr(response, "data", None) or [])
        ]
        data.sort(key=lambda d: d.index)
        return EmbeddingResponse(data=data, usage=_usage(getattr(response, "usage", None)))

    async def aclose(self) -> None:
        """Close underlying async client resources."""
        client = self._client
        if client is None:
            return
        self._client = None
        await client.close()


def _usage(usage: Any) -> Usage:
    """Normalize token counts from SDK usage payloads."""
    if usage is None:
        return Usage()
    prompt_tokens = int(getattr(usage, "prompt_tokens", 0) or 0)
    completion_tokens = int(getattr(usage, "completion_tokens", 0) or 0)
    total_tokens = int(getattr(usage, "total_tokens", 0) or 0)
    return Usage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=total_tokens,
    )


def _function_call(raw: Any) -> ProviderFunctionCall | None:
    if raw is None:
        return None
    return ProviderFunctionCall(
        name=str(getattr(raw, "name", None) or ""),
        arguments=str(getattr(raw, "arguments", None) or ""),
    )


def _completion_choice(raw: Any) -> CompletionChoice:
    return CompletionChoice(
        text=str(getattr(raw, "text", None) or ""),
        finish_reason=str(getattr(raw, "finish_reason", None) or ""),
    )


def _chat_chunk_choice(raw: Any) -> ChatChunkChoice:
    delta = getattr(raw, "delta", None)
    return ChatChunkChoice(
        delta=ChatDelta(
            role=getattr(delta, "role", None),
            content=str(getattr(delta, "content", None) or ""),
            function_call=_function_call(getattr(delta, "function_call", None)),
        ),
        finish_reason=str(getattr(raw, "finish_reason", None) or ""),
    )
