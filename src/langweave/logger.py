"""Request/response loggers injected into LLM instances.

A logger only observes: it never changes control flow and never swallows the
errors it is shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMLogger(Protocol):
    """Duck-typed protocol for LLM call loggers."""

    def llm_request(self, msg: str) -> None: ...  # noqa: D102
    def llm_response(self, msg: str) -> None: ...  # noqa: D102
    def llm_error(self, err: BaseException) -> None: ...  # noqa: D102


@dataclass(frozen=True)
class LoggingLLMLogger:
    """Write submitted queries, responses and errors to a stdlib logger."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("langweave.llm")
    )

    def llm_request(self, msg: str) -> None:
        self.logger.info("Submitted query: %s", msg)

    def llm_response(self, msg: str) -> None:
        self.logger.info("Received response: %s", msg)

    def llm_error(self, err: BaseException) -> None:
        self.logger.error("Received error: %s", err)


@dataclass(frozen=True, slots=True)
class NullLLMLogger:
    """A logger that discards everything."""

    def llm_request(self, msg: str) -> None:  # noqa: ARG002
        return None

    def llm_response(self, msg: str) -> None:  # noqa: ARG002
        return None

    def llm_error(self, err: BaseException) -> None:  # noqa: ARG002
        return None
