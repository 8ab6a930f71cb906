from deckpoller.db.database import init_db
from deckpoller.db.operations import (
    event_to_model,
    get_event,
    load_known_event_ids,
    persist_event,
    upsert_event,
)

__all__ = [
    "event_to_model",
    "get_event",
    "init_db",
    "load_known_event_ids",
    "persist_event",
    "upsert_event",
]
