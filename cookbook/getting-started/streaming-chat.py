#!/usr/bin/env python3
"""Recipe: Stream a chat reply to the terminal as it is generated.

Problem:
    Long replies feel slow when you only see them after the last token.

Key idea:
    Pass an async sink via `CallOptions(streaming_func=...)`. Every delta is
    handed to the sink as UTF-8 bytes before it is accumulated, and the
    returned message is exactly the concatenation of what the sink saw.
    Raising from the sink stops the stream early.

When to use:
    - Interactive tools where perceived latency matters.

When not to use:
    - You need token usage numbers (streamed calls carry none).
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from cookbook.utils.runtime import add_runtime_args, build_config_or_exit
from langweave import CallOptions, ChatLLM, Config, HumanChatMessage, SystemChatMessage


class StopStreaming(Exception):
    """Raised by the sink once enough characters were shown."""


async def main_async(question: str, *, max_chars: int, config: Config) -> None:
    shown = 0

    async def sink(chunk: bytes) -> None:
        nonlocal shown
        text = chunk.decode("utf-8")
        sys.stdout.write(text)
        sys.stdout.flush()
        shown += len(text)
        if max_chars and shown >= max_chars:
            raise StopStreaming

    print_section("Reply")
    async with ChatLLM.from_config(config) as chat:
        try:
            reply = await chat.call(
                [SystemChatMessage("Answer concisely."), HumanChatMessage(question)],
                CallOptions(streaming_func=sink, temperature=0.2),
            )
        except StopStreaming:
            print("\n[stopped early]")
            return
    print()

    print_section("Result")
    print_kv_rows([("Characters", len(reply.content))])
    print_learning_hints(
        [
            "Next: pass --max-chars to see how raising from the sink stops the stream.",
            "Next: run with --no-mock to stream from the real API.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Stream a chat reply")
    parser.add_argument(
        "--question",
        default="Explain what a token is in two sentences.",
        help="Question to ask",
    )
    parser.add_argument(
        "--max-chars", type=int, default=0, help="Stop after this many characters"
    )
    add_runtime_args(parser)
    args = parser.parse_args()
    config = build_config_or_exit(args)

    print_header("Streaming chat", config=config)
    asyncio.run(main_async(args.question, max_chars=max(0, args.max_chars), config=config))


if __name__ == "__main__":
    main()
