"""
Event assembly.

Turns a listing entry into a fully populated Event by running the text
parsers in sequence and threading format, date and event id down into each
deck.

Failure handling is asymmetric:
- Event page unreachable: the whole event fails (DetailFetchFailedError).
- One deck list unreachable: that deck is kept with empty card lists.
"""

import logging
from collections.abc import Callable

from deckpoller.models.errors import DetailFetchFailedError, TransportError
from deckpoller.models.event import Deck, Event, ListingEntry
from deckpoller.parsers.deck_list import extract_deck_headers, parse_card_list
from deckpoller.parsers.event_listing import classify_format, parse_event_date

logger = logging.getLogger(__name__)

FetchEventPage = Callable[[str], str]
FetchDeckList = Callable[[str, int], str]


def assemble_event(
    entry: ListingEntry,
    fetch_event_page: FetchEventPage,
    fetch_deck_list: FetchDeckList,
    reference_year: int,
) -> Event:
    """
    Build an Event with all of its decks.

    Args:
        entry: Listing entry to assemble
        fetch_event_page: Returns the results page HTML for an event id
        fetch_deck_list: Returns the deck list text for (event id, deck number)
        reference_year: Year attached to the listing's month/day date

    Returns:
        Event whose decks follow results page order

    Raises:
        UnparseableDateError: If the listing date cannot be parsed
        DetailFetchFailedError: If the results page cannot be fetched
    """
    event_format = classify_format(entry.name)
    event_date = parse_event_date(entry.date, reference_year)
    event_id = entry.hyperlink

    try:
        page_html = fetch_event_page(event_id)
    except TransportError as e:
        raise DetailFetchFailedError(
            event_id, f"Results page for event {event_id} unavailable: {e.message}"
        ) from e

    headers = extract_deck_headers(page_html)
    logger.info("Event %s found %d deck headers", event_id, len(headers))

    decks: list[Deck] = []
    # Deck number is the 1-based header position, never fetch order
    for deck_number, (pilot, result) in enumerate(headers, start=1):
        try:
            list_text = fetch_deck_list(event_id, deck_number)
        except TransportError as e:
            logger.warning(
                "Deck %d (%s) of event %s unavailable, keeping empty lists: %s",
                deck_number,
                pilot,
                event_id,
                e.message,
            )
            list_text = ""

        main_deck, sideboard = parse_card_list(list_text)
        deck = Deck(
            format=event_format,
            date=event_date,
            event_id=event_id,
            pilot=pilot,
            result=result,
            deck_number=deck_number,
            main_deck=tuple(main_deck),
            sideboard=tuple(sideboard),
        )
        logger.debug(
            "Deck %d (%s): %d main deck cards, %d sideboard cards",
            deck_number,
            pilot,
            deck.maindeck_count(),
            deck.sideboard_count(),
        )
        decks.append(deck)

    return Event(format=event_format, date=event_date, event_id=event_id, decks=tuple(decks))
