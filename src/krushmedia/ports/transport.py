"""Port: HTTP transport owned by the host framework.

The adapter never sends anything itself; this Protocol documents what the
host must do with each ``RequestData`` the adapter emits.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models.adapter import RequestData, ResponseData


@runtime_checkable
class HttpTransport(Protocol):
    """Perform one HTTP exchange and return the raw response."""

    def send(self, request: RequestData) -> ResponseData: ...
