"""Media type inference for returned bids."""

from __future__ import annotations

from collections.abc import Sequence

from ..models.adapter import BidType
from ..models.openrtb import Imp


def get_media_type_for_imp(imp_id: str, imps: Sequence[Imp]) -> BidType:
    """Video if the matching imp has a video object, else native, else banner.

    An id with no matching imp falls back to banner instead of failing.
    """
    for imp in imps:
        if imp.id == imp_id:
            if imp.video is not None:
                return BidType.video
            if imp.native is not None:
                return BidType.native
            return BidType.banner
    return BidType.banner
