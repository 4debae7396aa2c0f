"""Observability: one structured log record per adapter call, in-process counters.

``METRICS`` is process-wide and updated without a lock, so counts are
best-effort when rounds run concurrently. Results returned to the host never
depend on it.
"""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("krushmedia.adapter")

# calls[operation], errors[operation], dispositions[status outcome]
METRICS: dict[str, dict[str, int]] = {"calls": {}, "errors": {}, "dispositions": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def log_adapter_call(
    operation: str,
    disposition: str | None = None,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
    logger: Any = None,
) -> None:
    """Emit one structured log record and update the counters.

    The record goes to *logger* when given, otherwise to ``krushmedia.adapter``.
    """
    payload: dict[str, Any] = {"operation": operation}
    if disposition:
        payload["disposition"] = disposition
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    log = logger or _LOGGER
    if error:
        log.warning("adapter_call", extra=payload)
    else:
        log.info("adapter_call", extra=payload)

    METRICS["calls"][operation] = METRICS["calls"].get(operation, 0) + 1
    if error:
        METRICS["errors"][operation] = METRICS["errors"].get(operation, 0) + 1
    if disposition:
        METRICS["dispositions"][disposition] = METRICS["dispositions"].get(disposition, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return a copy of the current counters."""
    return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    for counters in METRICS.values():
        counters.clear()
