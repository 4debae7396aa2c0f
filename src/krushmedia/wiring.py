"""Composition root: the single place where the adapter is assembled.

Call ``build_bidder()`` to get a ready ``KrushmediaBidder``. The host
registers the result; no ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .config.runtime import AdapterSettings, get_settings
from .services.bidder import KrushmediaBidder


def build_bidder(settings: AdapterSettings | None = None) -> KrushmediaBidder:
    """Construct a KrushmediaBidder from settings.

    Raises:
        ConfigurationError: the configured endpoint template does not compile.
    """
    settings = settings or get_settings()
    return KrushmediaBidder.from_settings(settings)
