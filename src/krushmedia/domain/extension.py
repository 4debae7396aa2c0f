"""Bidder param extraction from ``imp.ext``.

Two sequential decodes: the generic ``{"bidder": ...}`` wrapper first, then
the Krushmedia params inside it. Both failures are ``BadInputError``; only the
message tells them apart.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import BadInputError
from ..models.ext import ExtImpBidder, ExtKrushmedia
from ..models.openrtb import Imp

MSG_EXT_MISSING = "Bidder extension not provided or can't be unmarshalled"
MSG_PARAMS_INVALID = "Error while unmarshaling bidder extension"

_M = TypeVar("_M", bound=BaseModel)


def _decode(model: type[_M], raw: Any) -> _M:
    """Validate already-decoded JSON, or a raw JSON byte payload.

    A ``str`` is a decoded JSON string, never re-parsed as a document.
    """
    if isinstance(raw, (bytes, bytearray)):
        return model.model_validate_json(raw)
    return model.model_validate(raw)


def parse_impression_ext(imp: Imp) -> ExtKrushmedia:
    """Return the Krushmedia params carried by *imp*.

    Raises:
        BadInputError: if the wrapper or the params cannot be decoded.
    """
    try:
        bidder_ext = _decode(ExtImpBidder, imp.ext)
    except ValidationError as exc:
        raise BadInputError(MSG_EXT_MISSING) from exc

    try:
        return _decode(ExtKrushmedia, bidder_ext.bidder)
    except ValidationError as exc:
        raise BadInputError(MSG_PARAMS_INVALID) from exc
