"""
JSON file export of ingested events.

Layout: <root>/<format>/<event_id>.json, one file per event. Writing the same
event again overwrites its file.
"""

import json
import logging
import re
from pathlib import Path

from deckpoller.models.errors import PersistError
from deckpoller.models.event import Event

logger = logging.getLogger(__name__)

# Path separators and other characters that cannot appear in a file name
_UNSAFE_PATH_CHARS = re.compile(r'[\\/:*?"<>|]')


def _safe_component(value: str) -> str:
    return _UNSAFE_PATH_CHARS.sub("_", value).strip() or "_"


def event_path(event: Event, root: Path) -> Path:
    """Return the file path an event is exported to."""
    return root / _safe_component(event.format) / f"{_safe_component(event.event_id)}.json"


def export_event(event: Event, root: Path) -> Path:
    """
    Write an event as indented JSON under its format directory.

    Args:
        event: Assembled event
        root: Export root directory

    Returns:
        Path of the written file

    Raises:
        PersistError: If the directory or file cannot be written
    """
    path = event_path(event, root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(event.to_dict(), indent="\t"), encoding="utf-8")
    except OSError as e:
        logger.error("Failed to export event %s to %s: %s", event.event_id, path, e)
        raise PersistError(event.event_id, f"Failed to export event {event.event_id}") from e

    logger.info("Exported event %s to %s", event.event_id, path)
    return path
