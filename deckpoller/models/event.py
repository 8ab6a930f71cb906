"""
Tournament result data model.

Event -> Deck -> Card aggregates are built once by the event assembler and
never mutated afterwards. ListingEntry is the source-side record decoded from
the listing service payload.
"""

from dataclasses import dataclass
from datetime import date as Date
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class Card:
    """
    One line item of a deck list.

    Attributes:
        number: Copies of this card in the list
        name: Card name exactly as it appears in the list
    """

    number: int
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"number": self.number, "name": self.name}


@dataclass(frozen=True, slots=True)
class Deck:
    """
    One participant's submission within an event.

    format, date and event_id are copies of the parent event's values so a
    deck record stays self-describing once flattened to storage.

    Attributes:
        format: Normalized format of the parent event
        date: Date of the parent event
        event_id: Identifier of the parent event
        pilot: Participant display name
        result: Standing/result string (e.g. "4-0")
        deck_number: 1-based position in the event's deck headers
        main_deck: Primary card list
        sideboard: Secondary card list, possibly empty
    """

    format: str
    date: Date
    event_id: str
    pilot: str
    result: str
    deck_number: int
    main_deck: tuple[Card, ...] = ()
    sideboard: tuple[Card, ...] = ()

    def maindeck_count(self) -> int:
        """Total cards in main deck."""
        return sum(card.number for card in self.main_deck)

    def sideboard_count(self) -> int:
        """Total cards in sideboard."""
        return sum(card.number for card in self.sideboard)

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "date": self.date.isoformat(),
            "event_id": self.event_id,
            "pilot": self.pilot,
            "result": self.result,
            "deck_number": self.deck_number,
            "main_deck": [card.to_dict() for card in self.main_deck],
            "sideboard": [card.to_dict() for card in self.sideboard],
        }


@dataclass(frozen=True, slots=True)
class Event:
    """
    One tournament instance.

    Attributes:
        format: Normalized format ("Standard", "Modern", ... or the raw name)
        date: Calendar date of the event
        event_id: Opaque identifier taken from the listing hyperlink
        decks: Decks in the order they appear on the results page
    """

    format: str
    date: Date
    event_id: str
    decks: tuple[Deck, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "date": self.date.isoformat(),
            "event_id": self.event_id,
            "decks": [deck.to_dict() for deck in self.decks],
        }


class ListingEntry(BaseModel):
    """
    A listing record as published by the results service.

    The service capitalizes its keys; lower-case spellings are accepted too.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(validation_alias=AliasChoices("date", "Date"))
    hyperlink: str = Field(validation_alias=AliasChoices("hyperlink", "Hyperlink"))
    name: str = Field(validation_alias=AliasChoices("name", "Name"))
