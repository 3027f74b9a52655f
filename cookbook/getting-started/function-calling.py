#!/usr/bin/env python3
"""Recipe: Let the model call a function and feed the result back.

Problem:
    The answer depends on data the model does not have (here: the weather).

Key idea:
    Declare functions via `CallOptions(functions=...)`. When the model picks
    one, the reply carries a `function_call` with the name and JSON
    arguments. Run it locally, then send a `FunctionChatMessage` with the
    result so the model can finish its answer.

When to use:
    - Tool-style lookups, calculators, database queries.

When not to use:
    - The model can answer from the prompt alone.
"""

from __future__ import annotations

import argparse
import asyncio
import json

from pydantic import BaseModel, Field

from cookbook.utils.presentation import (
    print_excerpt,
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from cookbook.utils.runtime import add_runtime_args, build_config_or_exit
from langweave import (
    CallOptions,
    ChatLLM,
    Config,
    FunctionChatMessage,
    FunctionDefinition,
    HumanChatMessage,
)


class WeatherQuery(BaseModel):
    location: str = Field(description="City name, e.g. 'Lisbon'")
    unit: str = Field(default="celsius", description="celsius or fahrenheit")


def get_weather(location: str, unit: str = "celsius") -> dict[str, object]:
    """Stand-in for a real weather lookup."""
    temp = 21 if unit == "celsius" else 70
    return {"location": location, "temperature": temp, "unit": unit, "sky": "clear"}


WEATHER = FunctionDefinition(
    name="get_weather",
    description="Get the current weather for a city",
    parameters=WeatherQuery,
)


async def main_async(city: str, *, config: Config) -> None:
    history = [HumanChatMessage(f"What's the weather like in {city}?")]
    options = CallOptions(functions=(WEATHER,), temperature=0)

    async with ChatLLM.from_config(config) as chat:
        first = await chat.call(history, options)

        if first.function_call is None:
            print_section("Model answered directly")
            print_excerpt("Answer", first.content)
            return

        args = WeatherQuery.model_validate_json(first.function_call.arguments)
        result = get_weather(args.location, args.unit)

        print_section("Function call")
        print_kv_rows(
            [
                ("Name", first.function_call.name),
                ("Arguments", first.function_call.arguments),
                ("Result", json.dumps(result)),
            ]
        )

        final = await chat.call(
            [*history, first, FunctionChatMessage(json.dumps(result), name=WEATHER.name)],
            options,
        )

    print_excerpt("Answer", final.content)
    print_learning_hints(
        [
            "Next: add a second function and watch which one the model picks.",
            "Next: run with --no-mock to see a real function call.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Function calling round trip")
    parser.add_argument("--city", default="Lisbon", help="City to ask about")
    add_runtime_args(parser)
    args = parser.parse_args()
    config = build_config_or_exit(args)

    print_header("Function calling", config=config)
    asyncio.run(main_async(args.city, config=config))


if __name__ == "__main__":
    main()
