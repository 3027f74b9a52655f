#!/usr/bin/env python3
"""Recipe: Ask for JSON fields and parse them with StructuredJSON.

Problem:
    Downstream code needs named fields, not free-form prose.

Key idea:
    Declare the fields with `ResponseJSONSchema`, put the parser's format
    instructions into the prompt, then `parse()` the reply. Missing fields
    or malformed JSON raise `ParseJSONError` with the offending text.

When to use:
    - Flat string outputs, like prompt generation for an image model.

When not to use:
    - Nested or typed outputs; validate those with your own pydantic model.
"""

from __future__ import annotations

import argparse
import asyncio

from cookbook.utils.presentation import (
    print_excerpt,
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
    print_usage,
)
from cookbook.utils.runtime import add_runtime_args, build_config_or_exit
from langweave import (
    CallOptions,
    CompletionLLM,
    Config,
    ParseJSONError,
    ResponseJSONSchema,
    StructuredJSON,
)

PARSER = StructuredJSON.from_schemas(
    [
        ResponseJSONSchema("prompt", "a detailed prompt for an image generation model"),
        ResponseJSONSchema("negativePrompt", "things the image must not contain"),
    ]
)


async def main_async(idea: str, *, config: Config) -> None:
    prompt = (
        f"Write an image generation prompt for this idea: {idea}\n\n"
        f"{PARSER.get_format_instructions()}"
    )

    async with CompletionLLM.from_config(config) as llm:
        (generation,) = await llm.generate([prompt], CallOptions(max_tokens=256, temperature=0))

    print_excerpt("Raw output", generation.text)
    try:
        fields = PARSER.parse(generation.text)
    except ParseJSONError as exc:
        print_section("Parse failed")
        print_kv_rows(
            [
                ("Missing", ", ".join(exc.missing_keys) or "-"),
                ("Reason", exc.reason[:200]),
            ]
        )
    else:
        print_section("Fields")
        print_kv_rows(list(fields.items()))

    print_usage(generation)
    print_learning_hints(
        [
            "Next: mock mode echoes the prompt, so parsing fails; try --no-mock.",
            "Next: track ParseJSONError rates before scaling up.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Structured JSON extraction")
    parser.add_argument(
        "--idea", default="a lighthouse in a storm at dusk", help="Image idea"
    )
    add_runtime_args(parser)
    args = parser.parse_args()
    config = build_config_or_exit(args)

    print_header("Structured output extraction", config=config)
    asyncio.run(main_async(args.idea, config=config))


if __name__ == "__main__":
    main()
