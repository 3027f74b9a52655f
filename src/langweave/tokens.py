"""Token counting for prompt budgeting."""

from __future__ import annotations

import logging

import tiktoken

log = logging.getLogger(__name__)


def _estimate_tokens_fallback(text: str) -> int:
    """Rough estimate for models tiktoken has no encoding for.

    Basic heuristic: ~4 characters per token for English text.
    """
    if not text.strip():
        return 0
    return max(1, len(text) // 4)


def count_tokens(model: str, text: str) -> int:
    """Count the tokens *model* would see for *text*."""
    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError:
        log.debug("No tiktoken encoding for model %r; estimating", model)
        return _estimate_tokens_fallback(text)
    return len(encoding.encode(text))
