"""Non-streaming collection: one provider response to one Generation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from langweave.errors import EmptyResponseError
from langweave.messages import AIChatMessage, FunctionCall
from langweave.result import (
    COMPLETION_TOKENS,
    FINISH_REASON,
    FINISH_REASON_FUNCTION_CALL,
    PROMPT_TOKENS,
    TOTAL_TOKENS,
    Generation,
)

if TYPE_CHECKING:
    from langweave.providers.models import (
        ChatCompletionResponse,
        CompletionResponse,
        Usage,
    )


def _generation_info(finish_reason: str, usage: Usage) -> dict[str, Any]:
    return {
        PROMPT_TOKENS: usage.prompt_tokens,
        COMPLETION_TOKENS: usage.completion_tokens,
        TOTAL_TOKENS: usage.total_tokens,
        FINISH_REASON: finish_reason,
    }


def collect_completion(response: CompletionResponse) -> Generation:
    """Extract the first choice of a completion response."""
    if not response.choices:
        raise EmptyResponseError()
    choice = response.choices[0]
    return Generation(
        text=choice.text,
        generation_info=_generation_info(choice.finish_reason, response.usage),
    )


def collect_chat(response: ChatCompletionResponse) -> Generation:
    """Extract the first choice of a chat response, including any function call."""
    if not response.choices:
        raise EmptyResponseError()
    choice = response.choices[0]
    text = choice.message.content

    function_call = None
    raw_call = choice.message.function_call
    if choice.finish_reason == FINISH_REASON_FUNCTION_CALL and raw_call is not None:
        function_call = FunctionCall(name=raw_call.name, arguments=raw_call.arguments)

    return Generation(
        text=text,
        message=AIChatMessage(content=text, function_call=function_call),
        generation_info=_generation_info(choice.finish_reason, response.usage),
    )
