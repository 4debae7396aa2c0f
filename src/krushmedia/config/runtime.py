"""Pydantic-based runtime settings for the Krushmedia adapter.

Loads from environment variables (with optional .env file).
Invalid values fail fast when the settings are first built.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ENDPOINT = "http://ads4.krushmedia.com/?c=rtb&m=req&key={{.AccountID}}"


class AdapterSettings(BaseSettings):
    """All configuration for the adapter, validated at startup."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Endpoint ---
    krushmedia_endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Endpoint URL template; {{.AccountID}} is replaced by the imp's 'key' param",
    )

    # --- Protocol ---
    openrtb_version: str = Field(default="2.5", description="Value sent in X-Openrtb-Version")

    @field_validator("krushmedia_endpoint")
    @classmethod
    def _endpoint_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("krushmedia_endpoint must not be blank")
        return v.strip()


@lru_cache(maxsize=1)
def get_settings() -> AdapterSettings:
    """Return the singleton AdapterSettings (cached after first call)."""
    return AdapterSettings()
