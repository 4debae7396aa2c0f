"""OpenRTB contracts and adapter envelopes."""

from .adapter import (
    BidderResponse,
    BidType,
    ExtraRequestInfo,
    RequestData,
    ResponseData,
    TypedBid,
)
from .ext import ExtImpBidder, ExtKrushmedia
from .openrtb import Bid, BidRequest, BidResponse, Device, Imp, SeatBid

__all__ = [
    # OpenRTB
    "Bid",
    "BidRequest",
    "BidResponse",
    "Device",
    "Imp",
    "SeatBid",
    # Extensions
    "ExtImpBidder",
    "ExtKrushmedia",
    # Adapter envelopes
    "BidderResponse",
    "BidType",
    "ExtraRequestInfo",
    "RequestData",
    "ResponseData",
    "TypedBid",
]
