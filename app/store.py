from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from app.schemas import Listing, Section
from config.defaults import DEFAULT_LISTINGS


DEFAULT_TRENDING = tuple(Listing(**item) for item in DEFAULT_LISTINGS["trending"])
DEFAULT_FEATURED = tuple(Listing(**item) for item in DEFAULT_LISTINGS["featured"])


class AuctionStore:
    """In-memory auction data for the lifetime of the process.

    Each instance owns its own copy of both sections, so the web app and the
    tests never share state by accident.
    """

    def __init__(
        self,
        trending: Optional[Iterable[Listing]] = None,
        featured: Optional[Iterable[Listing]] = None,
    ) -> None:
        self._sections: Dict[Section, List[Listing]] = {
            Section.TRENDING: [
                item.model_copy() for item in (DEFAULT_TRENDING if trending is None else trending)
            ],
            Section.FEATURED: [
                item.model_copy() for item in (DEFAULT_FEATURED if featured is None else featured)
            ],
        }

    def list_section(self, section: Section) -> List[Listing]:
        return list(self._sections[Section(section)])

    def add(self, section: Section, listing: Listing) -> Listing:
        self._sections[Section(section)].append(listing)
        return listing
