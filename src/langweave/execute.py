"""Generation execution: one shared loop for every call kind.

Items are processed strictly in order, one request in flight at a time. The
first failure aborts the whole call; generations produced for earlier items
are dropped and only the error reaches the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import json
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from langweave.collect import collect_chat, collect_completion
from langweave.errors import APIError
from langweave.request import CallKind, translate_messages
from langweave.streaming import accumulate_stream, chat_delta, completion_delta

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Sequence

    from langweave.logger import LLMLogger
    from langweave.messages import ChatMessage
    from langweave.options import StreamingFunc
    from langweave.providers.base import CompletionProvider
    from langweave.providers.models import ChatCompletionRequest, CompletionRequest
    from langweave.result import Generation
    from langweave.streaming import Delta

ItemT = TypeVar("ItemT")
RequestT = TypeVar("RequestT")


@dataclass(frozen=True)
class KindCodec(Generic[ItemT, RequestT]):
    """Per-kind encode/dispatch/decode functions for the shared loop."""

    kind: CallKind
    #: Fill one input item into the shared request.
    encode: Callable[[ItemT], RequestT]
    #: Text handed to ``LLMLogger.llm_request``.
    describe: Callable[[RequestT], str]
    issue: Callable[[RequestT], Awaitable[Any]]
    issue_stream: Callable[[RequestT], AsyncIterator[Any]]
    read_delta: Callable[[Any], Delta]
    collect: Callable[[Any], Generation]


def completion_codec(
    provider: CompletionProvider, base: CompletionRequest
) -> KindCodec[str, CompletionRequest]:
    """Codec for single-prompt completion calls."""
    return KindCodec(
        kind=CallKind.COMPLETION,
        encode=lambda prompt: replace(base, prompt=prompt),
        describe=lambda request: request.prompt,
        issue=provider.create_completion,
        issue_stream=provider.create_completion_stream,
        read_delta=completion_delta,
        collect=collect_completion,
    )


def chat_codec(
    provider: CompletionProvider, base: ChatCompletionRequest
) -> KindCodec[Sequence[ChatMessage], ChatCompletionRequest]:
    """Codec for multi-turn chat calls."""
    return KindCodec(
        kind=CallKind.CHAT,
        encode=lambda messages: replace(base, messages=translate_messages(messages)),
        describe=lambda request: json.dumps([m.to_dict() for m in request.messages]),
        issue=provider.create_chat_completion,
        issue_stream=provider.create_chat_completion_stream,
        read_delta=chat_delta,
        collect=collect_chat,
    )


async def generate_each(
    items: Sequence[ItemT],
    codec: KindCodec[ItemT, Any],
    *,
    sink: StreamingFunc | None,
    logger: LLMLogger,
) -> list[Generation]:
    """Issue one request per item and return generations in input order.

    Streams when *sink* is set, otherwise collects whole responses.
    """
    # Malformed input fails before any request is issued.
    requests = [codec.encode(item) for item in items]

    generations: list[Generation] = []
    for call_idx, request in enumerate(requests):
        logger.llm_request(codec.describe(request))
        try:
            if sink is not None:
                generation = await accumulate_stream(
                    codec.issue_stream(request),
                    sink,
                    read_delta=codec.read_delta,
                    chat=codec.kind is CallKind.CHAT,
                )
            else:
                generation = codec.collect(await codec.issue(request))
        except Exception as exc:
            if isinstance(exc, APIError) and exc.call_idx is None:
                exc.call_idx = call_idx
            logger.llm_error(exc)
            raise
        logger.llm_response(generation.text)
        generations.append(generation)
    return generations
