from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from config.defaults import DEFAULT_LISTINGS
from storefront.core.models import SECTIONS


@dataclass
class AuctionCard:
    """One rendered auction card.

    ``deadline`` mirrors the card's ``data-deadline`` attribute and
    ``countdown`` the text of its countdown element.
    """

    title: str = ""
    bid: str = ""
    deadline: Optional[str] = None
    countdown: str = ""
    # Deadline value that last rendered "Closed"; see CountdownTicker.
    closed_deadline: Optional[str] = None


DEFAULT_CARDS: Dict[str, List[Dict[str, str]]] = {
    spec.container_id: DEFAULT_LISTINGS[name] for name, spec in SECTIONS.items()
}


@dataclass
class AuctionBoard:
    """Render target holding the cards of every section container."""

    containers: Dict[str, List[AuctionCard]] = field(default_factory=dict)

    @classmethod
    def from_cards(cls, cards: Dict[str, Iterable[Dict[str, str]]]) -> "AuctionBoard":
        return cls(
            containers={
                container_id: [AuctionCard(**card) for card in items]
                for container_id, items in cards.items()
            }
        )

    @classmethod
    def default(cls) -> "AuctionBoard":
        return cls.from_cards(DEFAULT_CARDS)

    def cards(self, container_id: str) -> List[AuctionCard]:
        return self.containers.get(container_id, [])

    def all_cards(self) -> Iterator[AuctionCard]:
        for cards in self.containers.values():
            yield from cards

    def snapshot(self) -> Dict[str, List[Dict[str, Optional[str]]]]:
        return {
            spec.name: [
                {
                    "title": card.title,
                    "bid": card.bid,
                    "deadline": card.deadline,
                    "countdown": card.countdown,
                }
                for card in self.cards(spec.container_id)
            ]
            for spec in SECTIONS.values()
        }
