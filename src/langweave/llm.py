"""Completion and chat models.

Both models share the same loop (see ``langweave.execute``); they differ only
in what one input item is and how it is encoded and decoded.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Self

from langweave.embeddings import create_embedding
from langweave.errors import EmptyResponseError
from langweave.execute import chat_codec, completion_codec, generate_each
from langweave.logger import LoggingLLMLogger
from langweave.options import CallOptions
from langweave.request import (
    CallKind,
    build_chat_request,
    build_completion_request,
    resolve_model,
)
from langweave.result import LLMResult
from langweave.tokens import count_tokens

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from langweave.config import Config
    from langweave.logger import LLMLogger
    from langweave.messages import AIChatMessage, ChatMessage, PromptValue
    from langweave.providers.base import CompletionProvider
    from langweave.result import Generation

log = logging.getLogger(__name__)


def _get_provider(config: Config) -> CompletionProvider:
    """Get the appropriate provider based on configuration."""
    if config.use_mock:
        from langweave.providers.mock import MockProvider

        return MockProvider()

    from langweave.providers.openai import OpenAIProvider

    return OpenAIProvider(
        config.api_key or "",
        base_url=config.base_url,
        organization=config.organization,
        api_type=config.provider,
        api_version=config.api_version,
    )


class _BaseLLM:
    kind: CallKind

    def __init__(
        self,
        provider: CompletionProvider,
        *,
        model: str | None = None,
        logger: LLMLogger | None = None,
    ) -> None:
        self.provider = provider
        self.model = model or self.kind.default_model
        self.logger: LLMLogger = logger if logger is not None else LoggingLLMLogger()

    @classmethod
    def from_config(cls, config: Config, *, logger: LLMLogger | None = None) -> Self:
        """Build a model from a resolved Config."""
        return cls(_get_provider(config), model=config.model, logger=logger)

    def _model_for(self, options: CallOptions) -> str:
        return resolve_model(self.kind, options.model, self.model)

    def get_num_tokens(self, text: str) -> int:
        """Count tokens in *text* for this instance's model."""
        return count_tokens(self.model, text)

    async def create_embedding(
        self, texts: Sequence[str], *, model: str | None = None
    ) -> list[list[float]]:
        """Create one embedding vector per input text, in input order."""
        return await create_embedding(self.provider, texts, model=model)

    async def aclose(self) -> None:
        """Release the provider's client resources, if it holds any."""
        aclose = getattr(self.provider, "aclose", None)
        if not callable(aclose):
            return
        try:
            await aclose()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            # Cleanup should never mask the primary failure.
            log.warning("Provider cleanup failed: %s", exc)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


class CompletionLLM(_BaseLLM):
    """Single-prompt text completion model.

    Example:
        llm = CompletionLLM.from_config(Config())
        text = await llm.call("Say hello", CallOptions(max_tokens=16))
    """

    kind = CallKind.COMPLETION

    async def call(self, prompt: str, options: CallOptions | None = None) -> str:
        """Complete one prompt and return the generated text."""
        generations = await self.generate([prompt], options)
        if not generations:
            raise EmptyResponseError()
        return generations[0].text

    async def generate(
        self, prompts: Sequence[str], options: CallOptions | None = None
    ) -> list[Generation]:
        """Complete each prompt in order, one request at a time."""
        opts = options or CallOptions()
        base = build_completion_request(opts, model=self._model_for(opts))
        return await generate_each(
            list(prompts),
            completion_codec(self.provider, base),
            sink=opts.streaming_func,
            logger=self.logger,
        )

    async def generate_prompt(
        self, prompt_values: Sequence[PromptValue], options: CallOptions | None = None
    ) -> LLMResult:
        """Complete rendered prompt values."""
        generations = await self.generate([pv.to_string() for pv in prompt_values], options)
        return LLMResult(generations=[[g] for g in generations])


class ChatLLM(_BaseLLM):
    """Multi-turn chat model with optional function calling.

    Example:
        chat = ChatLLM.from_config(Config())
        reply = await chat.call([HumanChatMessage("Hi!")])
        print(reply.content)
    """

    kind = CallKind.CHAT

    async def call(
        self, messages: Sequence[ChatMessage], options: CallOptions | None = None
    ) -> AIChatMessage:
        """Send one conversation and return the model's reply."""
        generations = await self.generate([messages], options)
        if not generations or generations[0].message is None:
            raise EmptyResponseError()
        return generations[0].message

    async def generate(
        self,
        message_sets: Sequence[Sequence[ChatMessage]],
        options: CallOptions | None = None,
    ) -> list[Generation]:
        """Answer each conversation in order, one request at a time."""
        opts = options or CallOptions()
        base = build_chat_request(opts, model=self._model_for(opts))
        return await generate_each(
            list(message_sets),
            chat_codec(self.provider, base),
            sink=opts.streaming_func,
            logger=self.logger,
        )

    async def generate_prompt(
        self, prompt_values: Sequence[PromptValue], options: CallOptions | None = None
    ) -> LLMResult:
        """Answer rendered prompt values as conversations."""
        generations = await self.generate(
            [pv.to_chat_messages() for pv in prompt_values], options
        )
        return LLMResult(generations=[[g] for g in generations])
