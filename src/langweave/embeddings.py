"""Embedding extraction with strict input/output cardinality."""

from __future__ import annotations

from typing import TYPE_CHECKING

from langweave.errors import (
    EmptyResponseError,
    UnexpectedEmbeddingModelError,
    UnexpectedResponseLengthError,
)
from langweave.request import CallKind, build_embedding_request

if TYPE_CHECKING:
    from collections.abc import Sequence

    from langweave.providers.base import CompletionProvider

#: Human-readable model names mapped to provider embedding model ids.
EMBEDDING_MODELS: dict[str, str] = {
    "text-similarity-ada-001": "text-similarity-ada-001",
    "text-similarity-babbage-001": "text-similarity-babbage-001",
    "text-similarity-curie-001": "text-similarity-curie-001",
    "text-similarity-davinci-001": "text-similarity-davinci-001",
    "text-search-ada-doc-001": "text-search-ada-doc-001",
    "text-search-ada-query-001": "text-search-ada-query-001",
    "text-search-babbage-doc-001": "text-search-babbage-doc-001",
    "text-search-babbage-query-001": "text-search-babbage-query-001",
    "text-search-curie-doc-001": "text-search-curie-doc-001",
    "text-search-curie-query-001": "text-search-curie-query-001",
    "text-search-davinci-doc-001": "text-search-davinci-doc-001",
    "text-search-davinci-query-001": "text-search-davinci-query-001",
    "code-search-ada-code-001": "code-search-ada-code-001",
    "code-search-ada-text-001": "code-search-ada-text-001",
    "code-search-babbage-code-001": "code-search-babbage-code-001",
    "code-search-babbage-text-001": "code-search-babbage-text-001",
    "text-embedding-ada-002": "text-embedding-ada-002",
    "text-embedding-3-small": "text-embedding-3-small",
    "text-embedding-3-large": "text-embedding-3-large",
}


def resolve_embedding_model(model: str | None) -> str:
    """Map a model name to the provider's id; empty selects the default.

    Raises:
        UnexpectedEmbeddingModelError: If the name is not a known embedding model.
    """
    name = model or CallKind.EMBEDDING.default_model
    try:
        return EMBEDDING_MODELS[name]
    except KeyError:
        raise UnexpectedEmbeddingModelError(
            name,
            hint=f"Known models: {', '.join(sorted(EMBEDDING_MODELS))}",
        ) from None


async def create_embedding(
    provider: CompletionProvider,
    texts: Sequence[str],
    *,
    model: str | None = None,
) -> list[list[float]]:
    """Embed *texts* in one request, returning one vector per text in order.

    Raises:
        UnexpectedEmbeddingModelError: Before any request, for unknown models.
        EmptyResponseError: If the provider returns no vectors.
        UnexpectedResponseLengthError: If the vector count differs from the
            text count.
    """
    embedding_model = resolve_embedding_model(model)
    response = await provider.create_embeddings(
        build_embedding_request(embedding_model, texts)
    )

    data = response.data
    if not data:
        raise EmptyResponseError()
    if len(data) != len(texts):
        raise UnexpectedResponseLengthError(expected=len(texts), actual=len(data))

    return [[float(x) for x in item.embedding] for item in data]
