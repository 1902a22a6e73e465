from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from config.settings import get_settings
from storefront.core.models import SECTIONS, parse_overlays
from storefront.core.results import LoadResult, Outcome, Source


logger = logging.getLogger("mvp_auctions.storefront")


class ListingRejected(Exception):
    """The server refused a new listing; ``args[0]`` is its error text."""


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {response.status_code}"


class AuctionFeed:
    """Async client for the auction API.

    Pass ``client`` to share a connection pool or to point the feed at a test
    transport; otherwise one is created lazily and closed by ``close()``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url or get_settings().api_base_url
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(base_url=self.base_url)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def fetch_section(self, section: str) -> LoadResult:
        spec = SECTIONS[section]
        client = self._get_client()
        try:
            response = await client.get(spec.remote_path)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Fetching %s auctions failed: %s", section, exc)
            return LoadResult(Source.REMOTE, Outcome.FALLBACK, error=str(exc))
        except ValueError as exc:
            logger.warning("Undecodable %s auctions payload: %s", section, exc)
            return LoadResult(Source.REMOTE, Outcome.FALLBACK, error=str(exc))

        overlays = parse_overlays(data)
        if overlays is None:
            logger.warning("Ignoring %s auctions payload: expected a JSON array", section)
            return LoadResult(Source.REMOTE, Outcome.FALLBACK, error="expected a JSON array")
        return LoadResult(Source.REMOTE, Outcome.APPLIED, listings=overlays)

    async def create_auction(
        self, section: str, title: str, bid: str, deadline: str
    ) -> Dict[str, Any]:
        payload = {"section": section, "title": title, "bid": bid, "deadline": deadline}
        response = await self._get_client().post("/api/auctions", json=payload)
        if response.status_code == 400:
            raise ListingRejected(_error_text(response))
        response.raise_for_status()
        return response.json()
