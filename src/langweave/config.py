"""Configuration: Frozen Config resolving credentials from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal

from dotenv import load_dotenv

from langweave.errors import ConfigurationError
from langweave.providers.openai import DEFAULT_AZURE_API_VERSION

load_dotenv()

ProviderName = Literal["openai", "azure"]

TOKEN_ENV_VAR = "OPENAI_API_KEY"
MODEL_ENV_VAR = "OPENAI_MODEL"
BASE_URL_ENV_VAR = "OPENAI_BASE_URL"
ORGANIZATION_ENV_VAR = "OPENAI_ORGANIZATION"
API_VERSION_ENV_VAR = "OPENAI_API_VERSION"


@dataclass(frozen=True)
class Config:
    """Immutable client configuration.

    Unset fields are auto-resolved from the standard ``OPENAI_*`` environment
    variables. A missing API key is fatal here, before any request is made.

    Example:
        config = Config(model="gpt-3.5-turbo")
        # API key is automatically resolved from OPENAI_API_KEY
    """

    provider: ProviderName = "openai"
    #: Instance default model. Falls back to ``OPENAI_MODEL``, then to the
    #: per-call-kind default.
    model: str | None = None
    #: Auto-resolved from ``OPENAI_API_KEY`` when *None*.
    api_key: str | None = None
    base_url: str | None = None
    organization: str | None = None
    #: Azure only.
    api_version: str | None = None
    use_mock: bool = False

    def __post_init__(self) -> None:
        """Auto-resolve environment values and validate configuration."""
        if self.provider not in ("openai", "azure"):
            raise ConfigurationError(
                f"Unknown provider: {self.provider!r}",
                hint="Supported providers: 'openai', 'azure'",
            )

        for attr, env_var in (
            ("model", MODEL_ENV_VAR),
            ("base_url", BASE_URL_ENV_VAR),
            ("organization", ORGANIZATION_ENV_VAR),
            ("api_version", API_VERSION_ENV_VAR),
        ):
            if getattr(self, attr) is None:
                object.__setattr__(self, attr, os.environ.get(env_var) or None)

        if self.provider == "azure" and self.api_version is None:
            object.__setattr__(self, "api_version", DEFAULT_AZURE_API_VERSION)

        if self.api_key is None and not self.use_mock:
            object.__setattr__(self, "api_key", os.environ.get(TOKEN_ENV_VAR))

        if not self.use_mock and not self.api_key:
            raise ConfigurationError(
                f"API key required for {self.provider}",
                hint=f"Set {TOKEN_ENV_VAR} environment variable or pass api_key=...",
            )
        if self.provider == "azure" and not self.use_mock and not self.base_url:
            raise ConfigurationError(
                "base_url required for azure",
                hint=f"Set {BASE_URL_ENV_VAR} to your Azure OpenAI endpoint.",
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(provider={self.provider!r}, model={self.model!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"base_url={self.base_url!r}, use_mock={self.use_mock})"
        )

    __repr__ = __str__
