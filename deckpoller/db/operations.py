"""
Database operations for ingested events.

Events are written with overwrite semantics: storing an event id a second
time replaces its format, date and decks instead of appending.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from deckpoller.models.db import EventDB, EventDeckDB
from deckpoller.models.errors import PersistError
from deckpoller.models.event import Card, Deck, Event

logger = logging.getLogger(__name__)


async def get_event(session: AsyncSession, event_id: str) -> EventDB | None:
    """
    Get a stored event by event_id.

    Returns None if the event has not been ingested.
    """
    result = await session.execute(
        select(EventDB).where(EventDB.event_id == event_id).options(selectinload(EventDB.decks))
    )
    return result.scalar_one_or_none()


async def load_known_event_ids(session: AsyncSession) -> set[str]:
    """Return the ids of every stored event."""
    result = await session.execute(select(EventDB.event_id))
    return set(result.scalars().all())


def _deck_to_row(deck: Deck) -> EventDeckDB:
    return EventDeckDB(
        deck_number=deck.deck_number,
        pilot=deck.pilot,
        result=deck.result,
        main_deck=[card.to_dict() for card in deck.main_deck],
        sideboard=[card.to_dict() for card in deck.sideboard],
    )


async def upsert_event(session: AsyncSession, event: Event) -> EventDB:
    """
    Insert or replace an event.

    If an event with the same event_id exists, its fields are updated and
    its decks replaced. Otherwise a new record is created.
    """
    existing = await get_event(session, event.event_id)

    if existing:
        existing.format = event.format
        existing.date = event.date
        # Flush the orphan deletes before re-inserting the same deck numbers
        existing.decks.clear()
        await session.flush()
        existing.decks.extend(_deck_to_row(deck) for deck in event.decks)
        await session.flush()
        return existing

    db_event = EventDB(
        event_id=event.event_id,
        format=event.format,
        date=event.date,
        decks=[_deck_to_row(deck) for deck in event.decks],
    )
    session.add(db_event)
    await session.flush()
    return db_event


def event_to_model(db_event: EventDB) -> Event:
    """Convert a database event to a domain model."""
    decks = tuple(
        Deck(
            format=db_event.format,
            date=db_event.date,
            event_id=db_event.event_id,
            pilot=row.pilot,
            result=row.result,
            deck_number=row.deck_number,
            main_deck=tuple(Card(**card) for card in row.main_deck),
            sideboard=tuple(Card(**card) for card in row.sideboard),
        )
        for row in db_event.decks
    )
    return Event(
        format=db_event.format,
        date=db_event.date,
        event_id=db_event.event_id,
        decks=decks,
    )


async def persist_event(
    session_factory: async_sessionmaker[AsyncSession],
    event: Event,
) -> None:
    """
    Store one event in its own transaction.

    Raises:
        PersistError: If the write or commit fails. Nothing of the event is
            kept in that case.
    """
    async with session_factory() as session:
        try:
            await upsert_event(session, event)
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error("Failed to persist event %s: %s", event.event_id, e)
            raise PersistError(event.event_id, f"Failed to persist event {event.event_id}") from e

    logger.info("Saved event %s (%s, %d decks)", event.event_id, event.format, len(event.decks))
