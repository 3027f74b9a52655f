"""Streaming accumulation: assemble deltas into one Generation.

Each delta's text fragment is forwarded to the caller's sink before it is
accumulated. Raising from the sink is how callers stop a stream early; the
sink's exception propagates unchanged and no Generation is produced.
"""

from __future__ import annotations

from contextlib import aclosing
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from langweave.errors import EmptyResponseError
from langweave.messages import AIChatMessage, FunctionCall
from langweave.result import FINISH_REASON, FINISH_REASON_FUNCTION_CALL, Generation

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from langweave.options import StreamingFunc
    from langweave.providers.models import (
        ChatChunkChoice,
        CompletionChoice,
        ProviderFunctionCall,
    )


@dataclass(frozen=True)
class Delta:
    """The parts of one stream chunk the accumulator cares about."""

    text: str = ""
    finish_reason: str = ""
    function_call: ProviderFunctionCall | None = None


def completion_delta(choice: CompletionChoice) -> Delta:
    return Delta(text=choice.text, finish_reason=choice.finish_reason)


def chat_delta(choice: ChatChunkChoice) -> Delta:
    return Delta(
        text=choice.delta.content,
        finish_reason=choice.finish_reason,
        function_call=choice.delta.function_call,
    )


async def accumulate_stream(
    stream: AsyncIterator[Any],
    sink: StreamingFunc,
    *,
    read_delta: Callable[[Any], Delta],
    chat: bool,
) -> Generation:
    """Drive *stream* to completion and return the assembled Generation.

    Function-call argument fragments are concatenated across deltas and the
    first non-empty name is kept. A FunctionCall is only attached when the
    final finish reason is ``function_call``.

    Raises:
        EmptyResponseError: If a chunk carries no choices.
    """
    text_parts: list[str] = []
    finish_reason = ""
    fn_name = ""
    fn_args: list[str] = []

    async with aclosing(stream) as chunks:
        async for chunk in chunks:
            if not chunk.choices:
                raise EmptyResponseError()

            delta = read_delta(chunk.choices[0])
            await sink(delta.text.encode("utf-8"))

            text_parts.append(delta.text)
            if delta.finish_reason:
                finish_reason = delta.finish_reason
            if delta.function_call is not None:
                fn_name = fn_name or delta.function_call.name
                fn_args.append(delta.function_call.arguments)

    text = "".join(text_parts)
    function_call = None
    if finish_reason == FINISH_REASON_FUNCTION_CALL:
        function_call = FunctionCall(name=fn_name, arguments="".join(fn_args))

    return Generation(
        text=text,
        message=AIChatMessage(content=text, function_call=function_call) if chat else None,
        generation_info={FINISH_REASON: finish_reason},
    )
