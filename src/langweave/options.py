"""Per-call options for completion and chat requests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel

from langweave.errors import ConfigurationError

#: Receives each streamed text fragment; raising aborts the stream.
StreamingFunc = Callable[[bytes], Awaitable[None]]

FunctionCallBehavior = Literal["auto", "none"]
ParametersInput = type[BaseModel] | dict[str, Any]


@dataclass(frozen=True)
class FunctionDefinition:
    """A function the model may choose to call."""

    name: str
    description: str = ""
    #: Pydantic ``BaseModel`` subclass or JSON Schema dict.
    parameters: ParametersInput | None = None

    def __post_init__(self) -> None:
        """Validate the declaration early for clear errors."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError(
                "function name must be a non-empty string",
                hint="Pass FunctionDefinition(name='get_weather', ...).",
            )
        params = self.parameters
        if params is not None and not (
            isinstance(params, dict)
            or (isinstance(params, type) and issubclass(params, BaseModel))
        ):
            raise ConfigurationError(
                f"parameters for function {self.name!r} must be a Pydantic model class or JSON schema dict",
                hint="Pass a BaseModel subclass or a dict following JSON Schema.",
            )

    def parameters_json(self) -> dict[str, Any]:
        """Return the JSON Schema for the function parameters."""
        params = self.parameters
        if params is None:
            return {"type": "object", "properties": {}}
        if isinstance(params, dict):
            return params
        return params.model_json_schema()


@dataclass(frozen=True)
class CallOptions:
    """Optional generation settings for one ``call``/``generate`` invocation.

    Every field defaults to "unset"; unset values are left out of the provider
    request so the provider's own defaults apply. The one exception is chat
    ``max_tokens``, which falls back to 1024.
    """

    #: Overrides the model the LLM instance was built with.
    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    stop_words: tuple[str, ...] | None = None
    #: Number of choices to sample. Only the first one is returned.
    n: int | None = None
    #: Functions offered to chat models, in declaration order.
    functions: tuple[FunctionDefinition, ...] = ()
    #: Defaults to ``"auto"`` whenever functions are declared.
    function_call: FunctionCallBehavior | dict[str, str] | None = None
    #: Switches the call to streaming mode when set.
    streaming_func: StreamingFunc | None = None

    def __post_init__(self) -> None:
        """Normalize sequences and validate option shapes."""
        if self.stop_words is not None:
            if isinstance(self.stop_words, str):
                object.__setattr__(self, "stop_words", (self.stop_words,))
            else:
                object.__setattr__(self, "stop_words", tuple(self.stop_words))
        object.__setattr__(self, "functions", tuple(self.functions))

        if self.max_tokens is not None and (
            not isinstance(self.max_tokens, int) or self.max_tokens <= 0
        ):
            raise ConfigurationError(
                "max_tokens must be a positive integer",
                hint="Pass max_tokens=256 or leave it unset.",
            )
        if self.n is not None and (not isinstance(self.n, int) or self.n <= 0):
            raise ConfigurationError(
                "n must be a positive integer",
                hint="Pass n=1 or leave it unset.",
            )
        for fn in self.functions:
            if not isinstance(fn, FunctionDefinition):
                raise ConfigurationError(
                    f"functions must contain FunctionDefinition, got {type(fn).__name__}",
                    hint="Wrap each declaration in FunctionDefinition(name=..., ...).",
                )
        if self.streaming_func is not None and not callable(self.streaming_func):
            raise ConfigurationError(
                "streaming_func must be an async callable",
                hint="Pass an `async def on_chunk(chunk: bytes) -> None` function.",
            )

    @property
    def streaming(self) -> bool:
        return self.streaming_func is not None
