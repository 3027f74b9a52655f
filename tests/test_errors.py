from __future__ import annotations

import pytest

from langweave.errors import (
    APIError,
    EmptyResponseError,
    LangweaveError,
    OutputParserError,
    ParseJSONError,
    RateLimitError,
    ResponseError,
    UnexpectedEmbeddingModelError,
    UnexpectedResponseLengthError,
)

pytestmark = pytest.mark.unit


def test_api_error_structured_metadata() -> None:
    err = APIError(
        "boom",
        hint="do this",
        retryable=True,
        status_code=429,
        provider="openai",
        phase="chat completion",
        call_idx=1,
    )

    assert str(err) == "boom"
    assert err.hint == "do this"
    assert err.retryable is True
    assert err.status_code == 429
    assert err.provider == "openai"
    assert err.phase == "chat completion"
    assert err.call_idx == 1


def test_api_error_defaults_to_none() -> None:
    err = APIError("fail")
    assert err.hint is None
    assert err.retryable is None
    assert err.status_code is None
    assert err.provider is None
    assert err.phase is None
    assert err.call_idx is None


def test_subclass_hierarchy() -> None:
    """Shape errors and API errors are distinct branches of LangweaveError."""
    assert issubclass(RateLimitError, APIError)
    for cls in (
        EmptyResponseError,
        UnexpectedResponseLengthError,
        UnexpectedEmbeddingModelError,
    ):
        assert issubclass(cls, ResponseError)
        assert issubclass(cls, LangweaveError)
        assert not issubclass(cls, APIError)
    assert issubclass(ParseJSONError, OutputParserError)


def test_shape_error_messages() -> None:
    assert str(EmptyResponseError()) == "no response"
    assert str(UnexpectedResponseLengthError()) == "unexpected length of response"

    mismatch = UnexpectedResponseLengthError(expected=3, actual=2)
    assert str(mismatch) == "unexpected length of response: expected 3, got 2"
    assert (mismatch.expected, mismatch.actual) == (3, 2)

    unknown = UnexpectedEmbeddingModelError("not-a-real-model")
    assert unknown.model == "not-a-real-model"
    assert "unexpected embedding model" in str(unknown)


def test_parse_json_error_carries_text_and_reason() -> None:
    err = ParseJSONError('{"a": "b"}', "output is missing the following fields ['c']", missing_keys=["c"])

    assert err.text == '{"a": "b"}'
    assert err.missing_keys == ["c"]
    assert str(err) == "parse text {\"a\": \"b\"}. output is missing the following fields ['c']"
