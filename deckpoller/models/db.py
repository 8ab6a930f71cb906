"""
SQLAlchemy ORM models for persistent storage.

Models mirror the event dataclasses. Events are keyed by event_id and carry
their format; decks hang off their event and are replaced on re-ingestion.
"""

import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class EventDB(Base):
    """
    A tournament event stored in the database.

    Scraped from the Magic Online results listing.
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    format: Mapped[str] = mapped_column(String(255), index=True)
    date: Mapped[datetime.date] = mapped_column(Date)

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    decks: Mapped[list["EventDeckDB"]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="EventDeckDB.deck_number",
    )

    def __repr__(self) -> str:
        return f"<EventDB(event_id={self.event_id}, format={self.format})>"


class EventDeckDB(Base):
    """
    One participant's deck within a stored event.

    Card lists are stored as JSON arrays of {"number", "name"} objects.
    """

    __tablename__ = "event_decks"
    __table_args__ = (UniqueConstraint("event_pk", "deck_number", name="uq_event_deck_number"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_pk: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"), index=True
    )
    deck_number: Mapped[int] = mapped_column(Integer)
    pilot: Mapped[str] = mapped_column(String(255), index=True)
    result: Mapped[str] = mapped_column(String(255))

    main_deck: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    sideboard: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    event: Mapped["EventDB"] = relationship(back_populates="decks")

    def __repr__(self) -> str:
        return f"<EventDeckDB(pilot={self.pilot}, deck_number={self.deck_number})>"
