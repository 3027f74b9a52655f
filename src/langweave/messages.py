"""Chat message types exchanged with chat models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, runtime_checkable


class ChatMessageType(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    AI = "ai"
    HUMAN = "human"
    GENERIC = "generic"
    FUNCTION = "function"


@dataclass(frozen=True)
class FunctionCall:
    """A function invocation chosen by the model.

    ``arguments`` is the raw JSON string produced by the model; decoding it is
    the caller's job.
    """

    name: str
    arguments: str


@runtime_checkable
class ChatMessage(Protocol):
    """Anything that can be sent as one turn of a chat."""

    @property
    def type(self) -> ChatMessageType: ...  # noqa: D102

    @property
    def content(self) -> str: ...  # noqa: D102


@dataclass(frozen=True)
class SystemChatMessage:
    """Instruction from the system."""

    content: str
    type: ClassVar[ChatMessageType] = ChatMessageType.SYSTEM


@dataclass(frozen=True)
class AIChatMessage:
    """Message written by the model, optionally carrying a function call."""

    content: str = ""
    function_call: FunctionCall | None = None
    type: ClassVar[ChatMessageType] = ChatMessageType.AI


@dataclass(frozen=True)
class HumanChatMessage:
    """Message written by the user."""

    content: str
    type: ClassVar[ChatMessageType] = ChatMessageType.HUMAN


@dataclass(frozen=True)
class GenericChatMessage:
    """Message with an arbitrary role label; sent as a user turn."""

    content: str
    role: str = ""
    type: ClassVar[ChatMessageType] = ChatMessageType.GENERIC


@dataclass(frozen=True)
class FunctionChatMessage:
    """Result of a function call, reported back to the model."""

    content: str
    name: str
    type: ClassVar[ChatMessageType] = ChatMessageType.FUNCTION


@runtime_checkable
class PromptValue(Protocol):
    """A rendered prompt usable by both completion and chat models."""

    def to_string(self) -> str: ...  # noqa: D102

    def to_chat_messages(self) -> list[ChatMessage]: ...  # noqa: D102


@dataclass(frozen=True)
class StringPromptValue:
    """Plain-text prompt value; becomes a single human message for chat."""

    text: str

    def to_string(self) -> str:
        return self.text

    def to_chat_messages(self) -> list[ChatMessage]:
        return [HumanChatMessage(self.text)]


@dataclass(frozen=True)
class ChatPromptValue:
    """Conversation prompt value; rendered as ``Role: content`` lines for completion."""

    messages: tuple[ChatMessage, ...]

    def to_string(self) -> str:
        return "\n".join(f"{_role_label(m)}: {m.content}" for m in self.messages)

    def to_chat_messages(self) -> list[ChatMessage]:
        return list(self.messages)


_ROLE_LABELS: dict[ChatMessageType, str] = {
    ChatMessageType.SYSTEM: "System",
    ChatMessageType.AI: "AI",
    ChatMessageType.HUMAN: "Human",
    ChatMessageType.FUNCTION: "Function",
}


def _role_label(message: ChatMessage) -> str:
    if isinstance(message, GenericChatMessage):
        return message.role or "Generic"
    return _ROLE_LABELS.get(message.type, message.type.value)
