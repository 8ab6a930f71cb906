from deckpoller.parsers.deck_list import extract_deck_headers, parse_card_list
from deckpoller.parsers.event_listing import classify_format, parse_event_date

__all__ = [
    "classify_format",
    "extract_deck_headers",
    "parse_card_list",
    "parse_event_date",
]
