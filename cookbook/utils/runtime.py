"""Shared runtime helpers for cookbook recipes."""

from __future__ import annotations

import argparse
import sys

from langweave import Config
from langweave.errors import ConfigurationError

DEFAULT_PROVIDER = "openai"


def add_runtime_args(parser: argparse.ArgumentParser) -> None:
    """Add common provider/model/runtime arguments to a recipe parser."""
    parser.add_argument(
        "--provider",
        choices=("openai", "azure"),
        default=DEFAULT_PROVIDER,
        help="API flavor to use.",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Model id; defaults to the model kind's default.",
    )
    parser.add_argument(
        "--mock",
        action=argparse.BooleanOptionalAction,
        default=True,
        help=("Run in mock mode (default: enabled). Use --no-mock for real API calls."),
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="Optional API key override. Usually read from environment.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Endpoint override (required for Azure).",
    )


def build_config_or_exit(args: argparse.Namespace) -> Config:
    """Build Config from parsed args, exiting with a concise actionable error."""
    try:
        return Config(
            provider=args.provider,
            model=args.model,
            use_mock=bool(args.mock),
            api_key=args.api_key,
            base_url=args.base_url,
        )
    except ConfigurationError as exc:
        hint = f" Hint: {exc.hint}" if exc.hint else ""
        print(f"Configuration error: {exc}.{hint}", file=sys.stderr)
        raise SystemExit(2) from exc


def print_run_mode(config: Config) -> None:
    """Print a compact runtime mode line for recipe users."""
    mode = "mock" if config.use_mock else "real-api"
    model = config.model or "(default)"
    print(f"Mode: {mode} | provider={config.provider} | model={model}")
