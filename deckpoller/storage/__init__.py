from deckpoller.storage.json_export import event_path, export_event

__all__ = [
    "event_path",
    "export_event",
]
