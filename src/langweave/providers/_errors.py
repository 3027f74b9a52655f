"""Shared provider-side error helpers.

Providers map SDK exceptions into APIError so callers can branch on status
codes without brittle substring matching.
"""

from __future__ import annotations

import asyncio

import httpx

from langweave._http import RETRYABLE_STATUS_CODES
from langweave.errors import APIError, RateLimitError, _walk_exception_chain


def extract_status_code(exc: BaseException) -> int | None:
    """Walk the exception chain to find an HTTP status code."""
    for e in _walk_exception_chain(exc):
        for attr in ("status_code", "status"):
            value = getattr(e, attr, None)
            if isinstance(value, int) and 100 <= value <= 599:
                return value
        response = getattr(e, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int) and 100 <= value <= 599:
            return value
    return None


def _is_network_error(exc: BaseException) -> bool:
    for e in _walk_exception_chain(exc):
        if isinstance(e, (httpx.TimeoutException, httpx.RequestError)):
            return True
        # openai.APIConnectionError / APITimeoutError wrap httpx errors but
        # do not always chain them.
        if type(e).__name__ in {"APIConnectionError", "APITimeoutError"}:
            return True
    return False


def _auth_hint(provider: str, status_code: int | None) -> str | None:
    """Generate a hint for auth errors where naming the env var is useful."""
    if status_code in {401, 403}:
        env_var = "OPENAI_API_KEY" if provider in {"openai", "azure"} else "API key"
        return f"Check credentials/permissions (try setting {env_var} or Config.api_key)."
    return None


def wrap_provider_error(
    exc: BaseException,
    *,
    provider: str,
    phase: str,
    message: str | None = None,
    hint: str | None = None,
) -> APIError:
    """Map provider SDK exceptions into APIError with stable metadata."""
    if isinstance(exc, asyncio.CancelledError):
        raise exc

    # Already wrapped: fill in missing context only.
    if isinstance(exc, APIError):
        if exc.provider is None:
            exc.provider = provider
        if exc.phase is None:
            exc.phase = phase
        if hint is not None and exc.hint is None:
            exc.hint = hint
        return exc

    status_code = extract_status_code(exc)
    if isinstance(status_code, int):
        retryable = status_code in RETRYABLE_STATUS_CODES
    else:
        retryable = _is_network_error(exc)

    derived_hint = hint if hint is not None else _auth_hint(provider, status_code)
    msg = message or f"{provider} {phase} failed"

    err_cls: type[APIError] = RateLimitError if status_code == 429 else APIError
    status_note = f" (status={status_code})" if isinstance(status_code, int) else ""
    cause = str(exc)
    return err_cls(
        f"{msg}{status_note}: {cause}" if cause else f"{msg}{status_note}",
        hint=derived_hint,
        retryable=retryable,
        status_code=status_code,
        provider=provider,
        phase=phase,
    )
