"""Normalized generation records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from langweave.messages import AIChatMessage, FunctionCall

# generation_info keys
FINISH_REASON: Final[str] = "finish_reason"
PROMPT_TOKENS: Final[str] = "prompt_tokens"
COMPLETION_TOKENS: Final[str] = "completion_tokens"
TOTAL_TOKENS: Final[str] = "total_tokens"

#: Finish reason reported when the model chose to call a declared function.
FINISH_REASON_FUNCTION_CALL: Final[str] = "function_call"


@dataclass
class Generation:
    """One model output, produced per input prompt or message set.

    ``generation_info`` always holds ``finish_reason``. Token usage keys
    (``prompt_tokens``, ``completion_tokens``, ``total_tokens``) are present
    for non-streaming calls only, since streamed deltas carry no usage.
    """

    text: str
    #: Chat calls only.
    message: AIChatMessage | None = None
    generation_info: dict[str, Any] = field(default_factory=dict)

    @property
    def finish_reason(self) -> str:
        return str(self.generation_info.get(FINISH_REASON, ""))

    @property
    def function_call(self) -> FunctionCall | None:
        return self.message.function_call if self.message is not None else None


@dataclass
class LLMResult:
    """Generations for a batch of prompt values, one inner list per value."""

    generations: list[list[Generation]] = field(default_factory=list)
