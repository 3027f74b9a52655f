"""Real API smoke tests.

Skipped unless ENABLE_API_TESTS=1 and OPENAI_API_KEY are set.
"""

from __future__ import annotations

import pytest

from langweave import CallOptions, ChatLLM, Config, HumanChatMessage

pytestmark = pytest.mark.api


@pytest.mark.asyncio
async def test_chat_roundtrip(openai_api_key: str) -> None:
    async with ChatLLM.from_config(Config(api_key=openai_api_key)) as chat:
        reply = await chat.call(
            [HumanChatMessage("Reply with the single word: pong")],
            CallOptions(max_tokens=8, temperature=0),
        )

    assert "pong" in reply.content.lower()


@pytest.mark.asyncio
async def test_chat_streaming(openai_api_key: str) -> None:
    chunks: list[bytes] = []

    async def sink(chunk: bytes) -> None:
        chunks.append(chunk)

    async with ChatLLM.from_config(Config(api_key=openai_api_key)) as chat:
        reply = await chat.call(
            [HumanChatMessage("Count from 1 to 3.")],
            CallOptions(max_tokens=20, streaming_func=sink),
        )

    assert b"".join(chunks).decode() == reply.content


@pytest.mark.asyncio
async def test_embeddings(openai_api_key: str) -> None:
    async with ChatLLM.from_config(Config(api_key=openai_api_key)) as chat:
        vectors = await chat.create_embedding(["hello", "world"])

    assert len(vectors) == 2
    assert len(vectors[0]) == len(vectors[1]) > 0
