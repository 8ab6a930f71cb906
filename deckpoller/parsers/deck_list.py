"""
Parsers for event results pages and deck list downloads.

Results page headers:
    <heading>PILOT (RESULT)</heading>

Deck list download format (CRLF line endings):
    4 Lightning Bolt
    2 Opt

    3 Negate

Lines before the first blank line are the main deck; everything after it is
the sideboard.
"""

import re

from deckpoller.models.event import Card

# Pattern: "<heading>PlayerOne (5-0)</heading>"
# Groups: (pilot, result). Pilot is a single token without markup; result
# stops at the first closing tag so several headings on one line stay
# separate matches.
DECK_HEADER_PATTERN = re.compile(r"<heading>([^\s<]+) \(((?:(?!</heading>).)+)\)</heading>")

# Pattern: "4 Lightning Bolt" -> (4, Lightning Bolt)
CARD_LINE_PATTERN = re.compile(r"(\d+) (.+)")

LINE_SEPARATOR = "\r\n"


def extract_deck_headers(page_html: str) -> list[tuple[str, str]]:
    """
    Extract (pilot, result) pairs from an event results page.

    Args:
        page_html: Raw HTML of the results page

    Returns:
        Pairs in document order. Empty list if the page has no headers yet.
    """
    headers: list[tuple[str, str]] = []

    for match in DECK_HEADER_PATTERN.finditer(page_html):
        pilot, result = match.groups()
        if not pilot or not result:
            continue
        headers.append((pilot, result))

    return headers


def parse_card_list(raw_text: str) -> tuple[list[Card], list[Card]]:
    """
    Parse a deck list download into main deck and sideboard.

    Args:
        raw_text: Plain text deck list, one "qty CardName" per CRLF line

    Returns:
        Tuple of (main_deck, sideboard). Sideboard is empty if the text has
        no blank separator line.

    Handles:
        - Duplicate card names (kept as separate entries)
        - Stray non-card lines (skipped)
        - Zero or unrepresentable quantities (skipped)
        - Further blank lines after the separator (stay in sideboard)
    """
    main_deck: list[Card] = []
    sideboard: list[Card] = []

    in_sideboard = False
    for line in raw_text.split(LINE_SEPARATOR):
        # Blank line separates main deck from sideboard, one way only
        if not line:
            in_sideboard = True
            continue

        match = CARD_LINE_PATTERN.match(line)
        if not match:
            continue

        quantity, name = match.groups()
        try:
            number = int(quantity)
        except ValueError:
            # Counts past the int conversion digit limit
            continue
        if number < 1:
            continue

        card = Card(number=number, name=name)
        if in_sideboard:
            sideboard.append(card)
        else:
            main_deck.append(card)

    return main_deck, sideboard
