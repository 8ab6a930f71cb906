"""
Incremental event discovery.

Reads the remote listing once and assembles only the events whose id is not
already known. The known-id set belongs to the caller: it is read here and
never updated, so marking an event as known happens only after the caller
has persisted it.
"""

import logging
from collections.abc import Callable, Iterator, Set
from dataclasses import dataclass

from deckpoller.models.errors import (
    DecodeError,
    IngestError,
    ListingUnavailableError,
    TransportError,
)
from deckpoller.models.event import Event, ListingEntry
from deckpoller.services.assembler import FetchDeckList, FetchEventPage, assemble_event

logger = logging.getLogger(__name__)

FetchListing = Callable[[int], list[ListingEntry]]


@dataclass(frozen=True)
class AssemblyOutcome:
    """Result of assembling one unseen listing entry."""

    entry: ListingEntry
    event: Event | None = None
    error: IngestError | None = None

    @property
    def event_id(self) -> str:
        return self.entry.hyperlink

    @property
    def ok(self) -> bool:
        return self.event is not None


def fetch_unseen_entries(
    known_event_ids: Set[str],
    lookback_window: int,
    fetch_listing: FetchListing,
) -> list[ListingEntry]:
    """
    Fetch the listing and drop entries whose event id is already known.

    Duplicate hyperlinks within one listing are kept once, first occurrence.

    Raises:
        ListingUnavailableError: If the listing cannot be fetched or decoded
    """
    try:
        listing = fetch_listing(lookback_window)
    except (TransportError, DecodeError) as e:
        logger.error("Listing unavailable: %s", e.message)
        raise ListingUnavailableError(f"Listing unavailable: {e.message}") from e

    unseen: list[ListingEntry] = []
    seen_now: set[str] = set()
    for entry in listing:
        if entry.hyperlink in known_event_ids or entry.hyperlink in seen_now:
            continue
        seen_now.add(entry.hyperlink)
        unseen.append(entry)

    logger.info("Listing has %d entries, %d new", len(listing), len(unseen))
    return unseen


def discover_new_events(
    known_event_ids: Set[str],
    lookback_window: int,
    *,
    fetch_listing: FetchListing,
    fetch_event_page: FetchEventPage,
    fetch_deck_list: FetchDeckList,
    reference_year: int,
) -> Iterator[AssemblyOutcome]:
    """
    Yield an outcome for every listing entry not in known_event_ids.

    The listing is fetched before the first outcome is produced, so a
    listing failure surfaces on the first iteration step. Outcomes follow
    listing order; each event is fully assembled before the next starts.
    Stopping iteration early discards nothing but unassembled entries.

    Args:
        known_event_ids: Event ids already ingested (read only)
        lookback_window: Days of listing history to request
        fetch_listing: Returns listing entries for a lookback window
        fetch_event_page: Returns results page HTML for an event id
        fetch_deck_list: Returns deck list text for (event id, deck number)
        reference_year: Year attached to listing dates

    Raises:
        ListingUnavailableError: If the listing cannot be fetched or decoded
    """
    unseen = fetch_unseen_entries(known_event_ids, lookback_window, fetch_listing)

    for entry in unseen:
        try:
            event = assemble_event(entry, fetch_event_page, fetch_deck_list, reference_year)
        except IngestError as e:
            logger.error("Event %s failed (%s): %s", entry.hyperlink, e.kind.value, e.message)
            yield AssemblyOutcome(entry=entry, error=e)
            continue

        yield AssemblyOutcome(entry=entry, event=event)
