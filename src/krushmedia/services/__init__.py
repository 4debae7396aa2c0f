"""Services: per-round orchestration; rules live in domain."""

from .bidder import KrushmediaBidder, build_headers

__all__ = [
    "KrushmediaBidder",
    "build_headers",
]
