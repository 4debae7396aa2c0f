"""Envelopes exchanged with the host framework and its HTTP transport."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .openrtb import Bid


class BidType(str, Enum):
    banner = "banner"
    video = "video"
    native = "native"


class ExtraRequestInfo(BaseModel):
    """Per-round host context. Passed through, never interpreted."""

    model_config = {"extra": "allow"}


class RequestData(BaseModel):
    """One outbound HTTP call for the transport to perform."""

    method: str = Field(default="POST", description="HTTP method")
    uri: str = Field(..., description="Resolved endpoint URL")
    body: bytes = Field(default=b"", description="Serialised request body")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")


class ResponseData(BaseModel):
    """Raw HTTP response handed back by the transport."""

    status_code: int = Field(..., description="HTTP status code")
    body: bytes = Field(default=b"", description="Raw response body")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")


class TypedBid(BaseModel):
    """A bid paired with its inferred media type."""

    bid: Bid
    bid_type: BidType


class BidderResponse(BaseModel):
    """Bids this adapter contributes to the auction."""

    currency: str = Field(default="USD", description="Currency of all bid prices")
    bids: list[TypedBid] = Field(default_factory=list, description="Typed bids")
