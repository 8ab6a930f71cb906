"""
Magic Online results scraper.

Fetches the event listing, event results pages and per-deck list downloads
from the Wizards of the Coast results service.

Every non-success condition (network failure, timeout, non-2xx status)
collapses to TransportError. Nothing is retried here; the caller decides
whether to skip or abort.
"""

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from deckpoller.config import settings
from deckpoller.models.errors import DecodeError, TransportError
from deckpoller.models.event import ListingEntry

logger = logging.getLogger(__name__)

_LISTING_ADAPTER = TypeAdapter(list[ListingEntry])


def build_client() -> httpx.Client:
    """Create an httpx client configured from settings."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.http_timeout,
    )


def listing_url(lookback_window: int) -> str:
    """Build the listing URL for a lookback window in days."""
    return settings.listing_url.format(lookback=lookback_window)


def event_page_url(event_id: str) -> str:
    """Build the results page URL for an event."""
    return settings.event_page_url.format(event_id=event_id)


def deck_list_url(event_id: str, deck_number: int) -> str:
    """Build the deck list download URL for the n-th deck of an event."""
    return settings.deck_list_url.format(event_id=event_id, deck_number=deck_number)


def _get(url: str, client: httpx.Client | None = None) -> httpx.Response:
    try:
        if client:
            response = client.get(url)
        else:
            response = httpx.get(
                url,
                headers={"User-Agent": settings.user_agent},
                follow_redirects=True,
                timeout=settings.http_timeout,
            )
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Error retrieving %s: %s", url, e)
        raise TransportError(f"Error retrieving {url}: {e}", url=url) from e

    return response


def fetch_bytes(url: str, client: httpx.Client | None = None) -> bytes:
    """
    Fetch a URL and return the raw response body.

    Args:
        url: Absolute URL to GET
        client: Optional httpx client for connection reuse

    Returns:
        Response body bytes

    Raises:
        TransportError: If the request fails or returns a non-2xx status
    """
    return _get(url, client).content


def decode_listing(body: bytes) -> list[ListingEntry]:
    """
    Decode a listing payload into listing entries.

    Raises:
        DecodeError: If the body is not a JSON array of entry records
    """
    try:
        return _LISTING_ADAPTER.validate_json(body)
    except ValidationError as e:
        logger.error("Error parsing listing response: %s", e)
        raise DecodeError(f"Malformed listing payload: {e.error_count()} error(s)") from e


def fetch_listing(lookback_window: int, client: httpx.Client | None = None) -> list[ListingEntry]:
    """
    Fetch the event listing for the last `lookback_window` days.

    Args:
        lookback_window: Days of listing history to request
        client: Optional httpx client for connection reuse

    Returns:
        Listing entries in the order the service returned them

    Raises:
        TransportError: If the listing request fails
        DecodeError: If the payload is malformed
    """
    return decode_listing(fetch_bytes(listing_url(lookback_window), client))


def fetch_event_page(event_id: str, client: httpx.Client | None = None) -> str:
    """
    Fetch the results page for an event.

    Returns:
        Raw HTML content

    Raises:
        TransportError: If the request fails
    """
    return _get(event_page_url(event_id), client).text


def fetch_deck_list(event_id: str, deck_number: int, client: httpx.Client | None = None) -> str:
    """
    Fetch one deck list download.

    Args:
        event_id: Event identifier from the listing
        deck_number: 1-based position of the deck on the results page
        client: Optional httpx client for connection reuse

    Returns:
        Plain text deck list (qty CardName per CRLF line)

    Raises:
        TransportError: If the request fails
    """
    return _get(deck_list_url(event_id, deck_number), client).text
