"""Embedding creation: model lookup, cardinality and conversion."""

from __future__ import annotations

import pytest

from langweave.embeddings import EMBEDDING_MODELS, create_embedding, resolve_embedding_model
from langweave.errors import (
    EmptyResponseError,
    UnexpectedEmbeddingModelError,
    UnexpectedResponseLengthError,
)
from langweave.llm import CompletionLLM
from langweave.providers.models import EmbeddingData, EmbeddingResponse

pytestmark = pytest.mark.unit


def _response(*vectors: list[float]) -> EmbeddingResponse:
    return EmbeddingResponse(
        data=[EmbeddingData(embedding=v, index=i) for i, v in enumerate(vectors)]
    )


@pytest.mark.asyncio
async def test_one_vector_per_text_in_order(fake_provider) -> None:
    fake_provider.embedding_results = [_response([0.5, 1], [2, -0.25])]

    vectors = await create_embedding(fake_provider, ["first", "second"])

    assert vectors == [[0.5, 1.0], [2.0, -0.25]]
    assert all(isinstance(x, float) for v in vectors for x in v)
    (request,) = fake_provider.requests
    assert request.model == "text-embedding-ada-002"
    assert request.input == ["first", "second"]


@pytest.mark.asyncio
async def test_vector_count_mismatch_is_an_error(fake_provider) -> None:
    fake_provider.embedding_results = [_response([0.1], [0.2])]

    with pytest.raises(UnexpectedResponseLengthError) as exc_info:
        await create_embedding(fake_provider, ["a", "b", "c"])

    assert (exc_info.value.expected, exc_info.value.actual) == (3, 2)


@pytest.mark.asyncio
async def test_no_vectors_is_an_empty_response(fake_provider) -> None:
    fake_provider.embedding_results = [EmbeddingResponse()]

    with pytest.raises(EmptyResponseError):
        await create_embedding(fake_provider, ["a"])


@pytest.mark.asyncio
async def test_unknown_model_fails_before_any_request(fake_provider) -> None:
    with pytest.raises(UnexpectedEmbeddingModelError) as exc_info:
        await create_embedding(fake_provider, ["a"], model="text-embedding-9000")

    assert exc_info.value.model == "text-embedding-9000"
    assert fake_provider.requests == []


def test_known_models_resolve_to_themselves() -> None:
    for name in EMBEDDING_MODELS:
        assert resolve_embedding_model(name) == name
    assert resolve_embedding_model(None) == "text-embedding-ada-002"
    assert resolve_embedding_model("") == "text-embedding-ada-002"


@pytest.mark.asyncio
async def test_llm_create_embedding_delegates(fake_provider) -> None:
    fake_provider.embedding_results = [_response([1.0, 2.0])]
    llm = CompletionLLM(fake_provider)

    vectors = await llm.create_embedding(["x"], model="text-embedding-3-small")

    assert vectors == [[1.0, 2.0]]
    assert fake_provider.requests[0].model == "text-embedding-3-small"
