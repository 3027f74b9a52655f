"""Provider implementations."""

from .base import CompletionProvider
from .mock import MockProvider
from .openai import OpenAIProvider

__all__ = [
    "CompletionProvider",
    "MockProvider",
    "OpenAIProvider",
]
