"""Krushmedia OpenRTB bidder adapter."""

from .errors import AdapterError, BadInputError, BadServerResponseError, ConfigurationError
from .models import BidderResponse, BidRequest, BidType, RequestData, ResponseData, TypedBid
from .services import KrushmediaBidder

__version__ = "0.1.0"
__all__ = [
    "AdapterError",
    "BadInputError",
    "BadServerResponseError",
    "BidRequest",
    "BidType",
    "BidderResponse",
    "ConfigurationError",
    "KrushmediaBidder",
    "RequestData",
    "ResponseData",
    "TypedBid",
]
