"""
One-shot ingestion job.

Discovers unseen Magic Online events, persists each one and marks it known.
Can be run as a standalone script or called from a scheduler.

Usage:
    python -m deckpoller.jobs.poll_events --lookback 3 --export-dir events
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass, field
from datetime import date
from functools import partial
from pathlib import Path

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from deckpoller.config import settings
from deckpoller.db.database import async_session_factory, init_db
from deckpoller.db.operations import load_known_event_ids, persist_event
from deckpoller.models.errors import ErrorKind, ListingUnavailableError, PersistError
from deckpoller.scrapers.wizards import (
    build_client,
    fetch_deck_list,
    fetch_event_page,
    fetch_listing,
)
from deckpoller.services.discovery import discover_new_events
from deckpoller.storage.json_export import export_event

logger = logging.getLogger(__name__)


@dataclass
class PollSummary:
    """Outcome of one poll run."""

    discovered: int = 0
    persisted: list[str] = field(default_factory=list)
    failures: dict[str, ErrorKind] = field(default_factory=dict)


async def run_poll(
    lookback_window: int | None = None,
    *,
    reference_year: int | None = None,
    export_dir: Path | None = None,
    client: httpx.Client | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> PollSummary:
    """
    Run one discovery and ingestion pass.

    Args:
        lookback_window: Days of listing history. Defaults to settings.lookback_days.
        reference_year: Year for listing dates. Defaults to the current year.
        export_dir: Also write JSON files here. Defaults to settings.export_dir.
        client: HTTP client for requests. One is created and closed if omitted.
        session_factory: Session factory. Defaults to the configured database,
            whose tables are created first.

    Returns:
        PollSummary with persisted event ids and named failures

    Raises:
        ListingUnavailableError: If the listing cannot be fetched or decoded
    """
    if lookback_window is None:
        lookback_window = settings.lookback_days
    if reference_year is None:
        reference_year = date.today().year
    if export_dir is None:
        export_dir = settings.export_dir
    if session_factory is None:
        await init_db()
        session_factory = async_session_factory

    async with session_factory() as session:
        known_event_ids = await load_known_event_ids(session)
    logger.info("Loaded %d known events", len(known_event_ids))

    summary = PollSummary()
    owns_client = client is None
    http_client = client or build_client()

    try:
        outcomes = discover_new_events(
            known_event_ids,
            lookback_window,
            fetch_listing=partial(fetch_listing, client=http_client),
            fetch_event_page=partial(fetch_event_page, client=http_client),
            fetch_deck_list=partial(fetch_deck_list, client=http_client),
            reference_year=reference_year,
        )

        for outcome in outcomes:
            summary.discovered += 1

            if outcome.event is None:
                if outcome.error is not None:
                    summary.failures[outcome.event_id] = outcome.error.kind
                continue

            try:
                if export_dir is not None:
                    export_event(outcome.event, export_dir)
                await persist_event(session_factory, outcome.event)
            except PersistError as e:
                logger.error("Event %s not saved: %s", outcome.event_id, e.message)
                summary.failures[outcome.event_id] = e.kind
                continue

            known_event_ids.add(outcome.event_id)
            summary.persisted.append(outcome.event_id)

    except ListingUnavailableError:
        logger.error("Poll aborted, listing unavailable")
        raise
    finally:
        if owns_client:
            http_client.close()

    logger.info(
        "Poll complete. New events: %d, saved: %d, failed: %d",
        summary.discovered,
        len(summary.persisted),
        len(summary.failures),
    )
    for event_id, kind in summary.failures.items():
        logger.info("Event %s failed: %s", event_id, kind.value)

    return summary


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for running one poll."""
    parser = argparse.ArgumentParser(description="Ingest new Magic Online event results")
    parser.add_argument(
        "--lookback",
        type=int,
        default=settings.lookback_days,
        help="Days of listing history to request",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=settings.export_dir,
        help="Also write each event as JSON under this directory",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(run_poll(args.lookback, export_dir=args.export_dir))
    except ListingUnavailableError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
