"""Status code policy: ranked rules for the endpoint's HTTP status.

RULES (evaluated top to bottom, first match wins):
--------------------------------------------------

1. 204 No Content          -> no bids, not an error.
2. 400 Bad Request         -> BadInputError "Unexpected status code: [ 400 ]".
3. 503 Service Unavailable -> no bids, not an error; retry policy is the host's.
4. 200 OK                  -> decode the body.
5. anything else           -> BadServerResponseError naming the status code.

Only rule 4 continues to body parsing; every other rule short-circuits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Callable

from ..errors import AdapterError, BadInputError, BadServerResponseError


class Disposition(str, Enum):
    no_content = "no_content"
    bad_request = "bad_request"
    unavailable = "unavailable"
    ok = "ok"
    server_error = "server_error"


def _unexpected_status(status_code: int) -> AdapterError:
    return BadInputError(f"Unexpected status code: [ {status_code} ]")


def _something_went_wrong(status_code: int) -> AdapterError:
    return BadServerResponseError(
        "Something went wrong, please contact your Account Manager. "
        f"Status Code: [ {status_code} ] "
    )


@dataclass(frozen=True)
class StatusRule:
    """One row of the policy table. ``status=None`` matches any code."""

    status: int | None
    disposition: Disposition
    error: Callable[[int], AdapterError] | None = None

    def matches(self, status_code: int) -> bool:
        return self.status is None or self.status == status_code


@dataclass(frozen=True)
class StatusOutcome:
    disposition: Disposition
    error: AdapterError | None = None

    @property
    def has_body(self) -> bool:
        return self.disposition is Disposition.ok


STATUS_RULES: tuple[StatusRule, ...] = (
    StatusRule(HTTPStatus.NO_CONTENT, Disposition.no_content),
    StatusRule(HTTPStatus.BAD_REQUEST, Disposition.bad_request, _unexpected_status),
    StatusRule(HTTPStatus.SERVICE_UNAVAILABLE, Disposition.unavailable),
    StatusRule(HTTPStatus.OK, Disposition.ok),
    StatusRule(None, Disposition.server_error, _something_went_wrong),
)


def classify_status(
    status_code: int, rules: tuple[StatusRule, ...] = STATUS_RULES
) -> StatusOutcome:
    """Map *status_code* to the first matching rule's outcome."""
    for rule in rules:
        if rule.matches(status_code):
            error = rule.error(status_code) if rule.error else None
            return StatusOutcome(disposition=rule.disposition, error=error)
    raise ValueError(f"No status rule matched status code {status_code}")
