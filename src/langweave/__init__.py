"""Langweave: uniform completion, chat and embedding calls over LLM APIs.

Public API:
    - CompletionLLM / ChatLLM: call(), generate(), create_embedding()
    - CallOptions: Per-call generation settings
    - Generation: Normalized per-item result
    - StructuredJSON: Validate and describe structured model output
    - Config: Configuration dataclass
"""

from __future__ import annotations

import logging

from langweave.config import Config
from langweave.errors import (
    APIError,
    ConfigurationError,
    EmptyResponseError,
    LangweaveError,
    OutputParserError,
    ParseJSONError,
    RateLimitError,
    ResponseError,
    UnexpectedEmbeddingModelError,
    UnexpectedResponseLengthError,
)
from langweave.llm import ChatLLM, CompletionLLM
from langweave.logger import LLMLogger, LoggingLLMLogger, NullLLMLogger
from langweave.messages import (
    AIChatMessage,
    ChatMessage,
    ChatMessageType,
    ChatPromptValue,
    FunctionCall,
    FunctionChatMessage,
    GenericChatMessage,
    HumanChatMessage,
    PromptValue,
    StringPromptValue,
    SystemChatMessage,
)
from langweave.options import CallOptions, FunctionDefinition, StreamingFunc
from langweave.outputparser import ResponseJSONSchema, StructuredJSON
from langweave.result import Generation, LLMResult

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("langweave")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("langweave").addHandler(logging.NullHandler())

__all__ = [
    "AIChatMessage",
    "APIError",
    "CallOptions",
    "ChatLLM",
    "ChatMessage",
    "ChatMessageType",
    "ChatPromptValue",
    "CompletionLLM",
    "Config",
    "ConfigurationError",
    "EmptyResponseError",
    "FunctionCall",
    "FunctionChatMessage",
    "FunctionDefinition",
    "Generation",
    "GenericChatMessage",
    "HumanChatMessage",
    "LLMLogger",
    "LLMResult",
    "LangweaveError",
    "LoggingLLMLogger",
    "NullLLMLogger",
    "OutputParserError",
    "ParseJSONError",
    "PromptValue",
    "RateLimitError",
    "ResponseError",
    "ResponseJSONSchema",
    "StreamingFunc",
    "StringPromptValue",
    "StructuredJSON",
    "SystemChatMessage",
    "UnexpectedEmbeddingModelError",
    "UnexpectedResponseLengthError",
]
