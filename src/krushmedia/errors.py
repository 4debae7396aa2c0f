"""Error kinds surfaced to the host auction framework.

Per-round operations return these as values so the host can aggregate them
across adapters. ``ConfigurationError`` is the exception: it is raised at
construction time and never returned from a round.
"""

from __future__ import annotations


class AdapterError(Exception):
    """Base class for every error produced by the adapter."""

    code: str = "adapter_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdapterError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class BadInputError(AdapterError):
    """Malformed request data, bidder params or a rejected request (4xx)."""

    code = "bad_input"


class BadServerResponseError(AdapterError):
    """Unexpected status code or an undecodable success body."""

    code = "bad_server_response"


class ConfigurationError(AdapterError):
    """Invalid adapter configuration, e.g. an endpoint template that won't compile."""

    code = "configuration"
