from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from riftdex.models.db import Base


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
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


@pytest.fixture
def catalog_card() -> dict[str, Any]:
    """A card record as returned by the remote catalog."""
    return {
        "id": "origins-proving-grounds-001/024",
        "code": "OGS-001",
        "number": "001/024",
        "name": "Annie, Fiery",
        "cleanName": "Annie Fiery",
        "rarity": "Epic",
        "cardType": "Champion Unit",
        "domain": "Fury",
        "energyCost": "5",
        "powerCost": "1",
        "might": "4",
        "description": "When you play me, deal 3 to a unit.",
        "flavorText": "Have you seen Tibbers?",
        "images": {
            "small": "https://cdn.example.com/ogs-001-small.png",
            "large": "https://cdn.example.com/ogs-001-large.png",
        },
        "set": {"id": "OGS", "name": "Proving Grounds", "releaseDate": "2025-10-31"},
        "tcgplayer": {"id": 652771, "url": "https://www.tcgplayer.com/product/652771"},
        "presaleInfo": {"isPresale": False, "releasedOn": "2025-10-31", "note": None},
        "modifiedOn": "2025-10-20T12:00:00Z",
        "extraField": {"nested": [1, 2, 3]},
    }
