"""Run a cookbook recipe by name.

Examples:
- python -m cookbook                      (list recipes)
- python -m cookbook streaming-chat --question "Why is the sky blue?"
- python -m cookbook function-calling --no-mock
"""

from __future__ import annotations

from pathlib import Path
import runpy
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

RECIPE_DIR = Path(__file__).resolve().parent / "getting-started"


def recipes() -> dict[str, Path]:
    """Map recipe names (file stems) to their paths."""
    return {path.stem: path for path in sorted(RECIPE_DIR.glob("*.py"))}


def summary(path: Path) -> str:
    """Return the ``Recipe: ...`` line of a recipe's docstring."""
    for line in path.read_text().splitlines()[:5]:
        _, sep, rest = line.partition("Recipe:")
        if sep:
            return rest.strip().rstrip(".")
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    available = recipes()

    if not args or args[0] in {"-l", "--list"}:
        for name, path in available.items():
            print(f"  {name:<30s} {summary(path)}")
        print("\n  Run: python -m cookbook <recipe> [--help]")
        return 0

    name = args[0].removesuffix(".py")
    path = available.get(name)
    if path is None:
        print(f"Unknown recipe {name!r}. Available: {', '.join(available)}", file=sys.stderr)
        return 2

    saved_argv = sys.argv
    sys.argv = [str(path), *args[1:]]
    try:
        runpy.run_path(str(path), run_name="__main__")
    finally:
        sys.argv = saved_argv
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
