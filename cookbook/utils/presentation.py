"""Shared output helpers for cookbook recipe terminal presentation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookbook.utils.runtime import print_run_mode

if TYPE_CHECKING:
    from langweave import Config, Generation


def print_header(title: str, *, config: Config) -> None:
    """Print recipe title with a consistent runtime mode line."""
    print(title)
    print("=" * len(title))
    print_run_mode(config)


def print_section(title: str) -> None:
    """Print a named section heading."""
    print(f"\n{title}")
    print("-" * len(title))


def print_kv_rows(rows: list[tuple[str, object]]) -> None:
    """Print compact key/value rows using a uniform bullet style."""
    for key, value in rows:
        lines = str(value).splitlines() or [""]
        print(f"- {key}: {lines[0]}")
        for cont in lines[1:]:
            print(f"  {' ' * len(key)}  {cont}")


def print_excerpt(title: str, text: str, *, limit: int = 400) -> None:
    """Print a clipped text block when non-empty."""
    if not text:
        return
    cleaned = text.strip()
    clipped = cleaned[:limit] + ("..." if len(cleaned) > limit else "")
    print_section(title)
    for line in clipped.splitlines() or [""]:
        print(f"  {line}")


def print_usage(generation: Generation) -> None:
    """Print token usage when the generation carries it (non-streaming calls)."""
    info = generation.generation_info
    rows: list[tuple[str, object]] = [
        (label, info[key])
        for label, key in (
            ("Prompt tokens", "prompt_tokens"),
            ("Completion tokens", "completion_tokens"),
            ("Total tokens", "total_tokens"),
        )
        if isinstance(info.get(key), int)
    ]
    if rows:
        print_section("Usage")
        print_kv_rows(rows)


def print_learning_hints(hints: list[str]) -> None:
    """Print next-step hints at the end of a recipe."""
    if not hints:
        return
    print_section("Next steps")
    for hint in hints:
        print(f"- {hint}")
