"""
Ingestion error taxonomy.

Every failure that can stop an event (or a whole discovery run) from being
ingested is classified by an ErrorKind so the poll job can report a named
reason per event.

Propagation:
- Text extractors never raise on noisy lines; they drop or degrade.
- The date parser raises UnparseableDateError on structural failure.
- Transport raises TransportError / DecodeError.
- Assembly raises DetailFetchFailedError when the event page is unreachable.
- Discovery raises ListingUnavailableError when the listing cannot be read.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of ingestion failures."""

    # Transport layer
    TRANSPORT = "transport_error"
    DECODE = "decode_error"

    # Fatal to a whole discovery call
    LISTING_UNAVAILABLE = "listing_unavailable"

    # Fatal to a single event
    UNPARSEABLE_DATE = "unparseable_date"
    DETAIL_FETCH_FAILED = "detail_fetch_failed"

    # Storage
    PERSIST_FAILED = "persist_failed"


class IngestError(Exception):
    """
    Base class for classified ingestion failures.

    Attributes:
        kind: ErrorKind classification
        message: Human-readable description
    """

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class TransportError(IngestError):
    """Network failure, timeout or non-2xx response. Never retried internally."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(ErrorKind.TRANSPORT, message)


class DecodeError(IngestError):
    """Listing payload could not be decoded into listing entries."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.DECODE, message)


class ListingUnavailableError(IngestError):
    """The remote listing could not be fetched or decoded."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.LISTING_UNAVAILABLE, message)


class UnparseableDateError(IngestError):
    """A listing date did not contain a valid month/day."""

    def __init__(self, raw_date: str):
        self.raw_date = raw_date
        super().__init__(ErrorKind.UNPARSEABLE_DATE, f"Unparseable event date: {raw_date!r}")


class DetailFetchFailedError(IngestError):
    """The event results page could not be fetched."""

    def __init__(self, event_id: str, message: str):
        self.event_id = event_id
        super().__init__(ErrorKind.DETAIL_FETCH_FAILED, message)


class PersistError(IngestError):
    """An assembled event could not be written to storage."""

    def __init__(self, event_id: str, message: str):
        self.event_id = event_id
        super().__init__(ErrorKind.PERSIST_FAILED, message)
