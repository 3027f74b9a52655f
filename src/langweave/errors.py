"""Exception hierarchy for Langweave."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LangweaveError(Exception):
    """Base exception for all Langweave errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(LangweaveError):
    """Configuration validation or resolution failed."""


class APIError(LangweaveError):
    """API call failed.

    ``retryable`` is informational: Langweave never retries, but callers that
    wrap it in their own retry loop can branch on it.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        retryable: bool | None = None,
        status_code: int | None = None,
        provider: str | None = None,
        phase: str | None = None,
        call_idx: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.retryable = retryable
        self.status_code = status_code
        self.provider = provider
        self.phase = phase
        self.call_idx = call_idx


class RateLimitError(APIError):
    """Rate limit exceeded (HTTP 429)."""


class ResponseError(LangweaveError):
    """The provider answered, but the answer has an unusable shape."""


class EmptyResponseError(ResponseError):
    """The provider returned no choices or no embedding vectors."""

    def __init__(self, message: str = "no response", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class UnexpectedResponseLengthError(ResponseError):
    """The number of returned items does not match the number requested."""

    def __init__(
        self,
        message: str = "unexpected length of response",
        *,
        expected: int | None = None,
        actual: int | None = None,
        hint: str | None = None,
    ) -> None:
        if expected is not None and actual is not None:
            message = f"{message}: expected {expected}, got {actual}"
        super().__init__(message, hint=hint)
        self.expected = expected
        self.actual = actual


class UnexpectedEmbeddingModelError(ResponseError):
    """The requested embedding model is not a known provider model."""

    def __init__(self, model: str, *, hint: str | None = None) -> None:
        super().__init__(f"unexpected embedding model: {model!r}", hint=hint)
        self.model = model


class OutputParserError(LangweaveError):
    """Model output could not be turned into structured data."""

    def __init__(self, message: str, *, text: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.text = text


class ParseJSONError(OutputParserError):
    """Model output is not valid JSON or lacks declared fields."""

    def __init__(
        self,
        text: str,
        reason: str,
        *,
        missing_keys: list[str] | None = None,
    ) -> None:
        super().__init__(f"parse text {text}. {reason}", text=text)
        self.reason = reason
        self.missing_keys = list(missing_keys or [])


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
