from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from storefront.core.models import ListingOverlay


class Source(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class Outcome(str, Enum):
    APPLIED = "applied"
    MISSING = "missing"  # nothing cached under the key
    FALLBACK = "fallback"  # source failed, whatever was rendered stays


@dataclass
class LoadResult:
    """What one data source produced for one section."""

    source: Source
    outcome: Outcome
    listings: List[ListingOverlay] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.outcome is not Outcome.APPLIED


@dataclass
class SectionLoad:
    section: str
    remote: LoadResult
    local: LoadResult
