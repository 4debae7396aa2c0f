"""OpenRTB 2.5 request/response contracts.

Only the fields the adapter reads are declared. Everything else is kept as an
extra so a request can be re-serialised without losing data.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

_PASSTHROUGH = {"extra": "allow"}


class Device(BaseModel):
    """Device context used to derive forwarding headers."""

    model_config = _PASSTHROUGH

    ua: str | None = Field(default=None, description="User-Agent string")
    ip: str | None = Field(default=None, description="IPv4 address")
    language: str | None = Field(default=None, description="Browser language (ISO-639-1)")
    dnt: int | None = Field(default=None, description="Do Not Track flag (0 or 1)")


class Imp(BaseModel):
    """A single impression offered for bid."""

    model_config = _PASSTHROUGH

    id: str = Field(..., description="Impression identifier, unique within the request")
    banner: dict[str, Any] | None = Field(default=None, description="Banner descriptor")
    video: dict[str, Any] | None = Field(default=None, description="Video descriptor")
    native: dict[str, Any] | None = Field(default=None, description="Native descriptor")
    ext: Any = Field(default=None, description="Opaque extension holding bidder params")


class BidRequest(BaseModel):
    """Inbound bid request from the host auction."""

    model_config = _PASSTHROUGH

    id: str = Field(..., description="Auction identifier")
    imp: list[Imp] = Field(default_factory=list, description="Impressions offered")
    device: Device | None = Field(default=None, description="Device context")

    def to_json(self) -> bytes:
        """Canonical JSON body: aliases applied, absent fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class Bid(BaseModel):
    """A bid returned by the endpoint; only ``impid`` is interpreted."""

    model_config = _PASSTHROUGH

    id: str | None = Field(default=None, description="Bidder-generated bid identifier")
    impid: str = Field(..., description="Impression this bid is for")
    price: float | None = Field(default=None, description="Bid price (CPM)")


class SeatBid(BaseModel):
    """Bids grouped by buying seat."""

    model_config = _PASSTHROUGH

    bid: list[Bid] = Field(default_factory=list, description="Bids in this seat")
    seat: str | None = Field(default=None, description="Seat identifier")


class BidResponse(BaseModel):
    """Response body returned by the endpoint on 200."""

    model_config = _PASSTHROUGH

    id: str | None = Field(default=None, description="Echo of the request id")
    seatbid: list[SeatBid] = Field(default_factory=list, description="Seat groupings")
    cur: str | None = Field(default=None, description="Bid currency")
