#!/usr/bin/env python3
"""Recipe: Rank texts by similarity to a query with embeddings.

Problem:
    You want the most relevant snippet for a question without another model call.

Key idea:
    `create_embedding()` embeds every text in one request and returns one
    vector per text, in input order. Cosine similarity does the rest.

When to use:
    - Small retrieval tasks and deduplication.
"""

from __future__ import annotations

import argparse
import asyncio
import math

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from cookbook.utils.runtime import add_runtime_args, build_config_or_exit
from langweave import CompletionLLM, Config

DOCUMENTS = [
    "The Eiffel Tower is in Paris.",
    "Photosynthesis turns light into chemical energy.",
    "Python is a popular programming language.",
    "The Seine flows through Paris.",
]


def cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b, strict=True))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


async def main_async(query: str, *, embedding_model: str | None, config: Config) -> None:
    async with CompletionLLM.from_config(config) as llm:
        vectors = await llm.create_embedding([query, *DOCUMENTS], model=embedding_model)

    query_vec, doc_vecs = vectors[0], vectors[1:]
    ranked = sorted(
        zip(DOCUMENTS, (cosine(query_vec, v) for v in doc_vecs), strict=True),
        key=lambda pair: pair[1],
        reverse=True,
    )

    print_section("Ranking")
    print_kv_rows([(f"{score:.3f}", doc) for doc, score in ranked])
    print_learning_hints(
        [
            "Next: try --embedding-model text-embedding-3-small with --no-mock.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Embedding similarity ranking")
    parser.add_argument("--query", default="What is in Paris?", help="Query text")
    parser.add_argument("--embedding-model", default=None, help="Embedding model name")
    add_runtime_args(parser)
    args = parser.parse_args()
    config = build_config_or_exit(args)

    print_header("Embedding similarity", config=config)
    asyncio.run(main_async(args.query, embedding_model=args.embedding_model, config=config))


if __name__ == "__main__":
    main()
