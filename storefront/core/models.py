from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, model_validator


OVERLAY_FIELDS = ("title", "bid", "deadline")
SOLD_BEFORE_KEY = "hasSoldBefore"


@dataclass(frozen=True)
class SectionSpec:
    name: str
    container_id: str
    remote_path: str
    storage_key: str


SECTIONS: Dict[str, SectionSpec] = {
    "trending": SectionSpec(
        name="trending",
        container_id="trending-cards",
        remote_path="/api/auctions/trending",
        storage_key="trendingAuctions",
    ),
    "featured": SectionSpec(
        name="featured",
        container_id="featured-cards",
        remote_path="/api/auctions/featured",
        storage_key="featuredAuctions",
    ),
}


class ListingOverlay(BaseModel):
    """A partial listing. Every field left as ``None`` leaves the card alone."""

    title: Optional[str] = None
    bid: Optional[str] = None
    deadline: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_unusable(cls, values):
        # Anything that is not an object becomes an empty overlay, and
        # non-string fields count as absent.
        if not isinstance(values, dict):
            return {}
        return {
            key: values[key]
            for key in OVERLAY_FIELDS
            if isinstance(values.get(key), str)
        }


def parse_overlays(raw: Any) -> Optional[List[ListingOverlay]]:
    """Decode a JSON-loaded value into overlays, or ``None`` if it is not an array."""
    if not isinstance(raw, list):
        return None
    return [ListingOverlay.model_validate(item) for item in raw]
