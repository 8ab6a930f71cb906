from deckpoller.models.errors import (
    DecodeError,
    DetailFetchFailedError,
    ErrorKind,
    IngestError,
    ListingUnavailableError,
    PersistError,
    TransportError,
    UnparseableDateError,
)
from deckpoller.models.event import Card, Deck, Event, ListingEntry

__all__ = [
    "Card",
    "Deck",
    "DecodeError",
    "DetailFetchFailedError",
    "ErrorKind",
    "Event",
    "IngestError",
    "ListingEntry",
    "ListingUnavailableError",
    "PersistError",
    "TransportError",
    "UnparseableDateError",
]
