from datetime import date
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from deckpoller.config import settings
from deckpoller.models.db import Base
from deckpoller.models.event import Card, Deck, Event, ListingEntry

FIXTURES = Path(__file__).parent / "fixtures"

# Test endpoints without query strings so respx routes match on path alone
TEST_LISTING_URL = "https://results.test/listing/{lookback}"
TEST_EVENT_PAGE_URL = "https://results.test/events/{event_id}"
TEST_DECK_LIST_URL = "https://results.test/events/{event_id}/decks/{deck_number}"


@pytest.fixture
def event_page_html() -> str:
    return (FIXTURES / "wotc_event_page.html").read_text()


@pytest.fixture
def listing_json() -> bytes:
    return (FIXTURES / "wotc_listing.json").read_bytes()


@pytest.fixture
def sample_deck_list() -> str:
    """Deck list download as served: CRLF lines, blank line before sideboard."""
    return "\r\n".join(
        [
            "4 Lightning Bolt",
            "4 Monastery Swiftspear",
            "20 Mountain",
            "",
            "2 Pyroblast",
            "1 Smash to Smithereens",
        ]
    )


@pytest.fixture
def sample_entry() -> ListingEntry:
    return ListingEntry(date="3/15", hyperlink="mdaily6001", name="Modern Daily #6001")


@pytest.fixture
def sample_event() -> Event:
    deck = Deck(
        format="Modern",
        date=date(2013, 3, 15),
        event_id="mdaily6001",
        pilot="PlayerOne",
        result="4-0",
        deck_number=1,
        main_deck=(Card(4, "Lightning Bolt"), Card(20, "Mountain")),
        sideboard=(Card(2, "Pyroblast"),),
    )
    return Event(format="Modern", date=date(2013, 3, 15), event_id="mdaily6001", decks=(deck,))


@pytest.fixture
def stub_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the scraper at test endpoints."""
    monkeypatch.setattr(settings, "listing_url", TEST_LISTING_URL)
    monkeypatch.setattr(settings, "event_page_url", TEST_EVENT_PAGE_URL)
    monkeypatch.setattr(settings, "deck_list_url", TEST_DECK_LIST_URL)


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine shared by every session of a test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory) -> AsyncSession:
    """Provide a database session for tests."""
    async with session_factory() as session:
        yield session
