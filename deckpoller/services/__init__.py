"""
deckpoller services.

Event assembly and incremental discovery.
"""

from deckpoller.services.assembler import assemble_event
from deckpoller.services.discovery import (
    AssemblyOutcome,
    discover_new_events,
    fetch_unseen_entries,
)

__all__ = [
    "AssemblyOutcome",
    "assemble_event",
    "discover_new_events",
    "fetch_unseen_entries",
]
