"""Impression extension payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ExtImpBidder(BaseModel):
    """Generic ``imp.ext`` wrapper: bidder params live under ``bidder``."""

    bidder: Any = Field(default=None, description="Bidder-owned params, opaque at this level")


class ExtKrushmedia(BaseModel):
    """Krushmedia bidder params."""

    model_config = {"populate_by_name": True}

    account_id: str = Field(
        ...,
        alias="key",
        min_length=1,
        description="Krushmedia account key; becomes the endpoint's AccountID",
    )
