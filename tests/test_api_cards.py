"""Tests for card API endpoints."""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from riftdex.db.database import get_session
from riftdex.db.operations import upsert_card
from riftdex.main import app
from riftdex.models.card import Card
from riftdex.parsers.api_tcg import parse_card


@pytest.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]):
    """Provide an async test client with overridden database session."""

    async def override_get_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_db(session_factory, catalog_card: dict[str, Any]) -> None:
    """Seed database with test cards."""
    async with session_factory() as session:
        await upsert_card(session, parse_card(catalog_card, "riftbound"))
        await upsert_card(
            session, Card(game="riftbound", remote_id="ogn-017", name="Jinx, the Loose Cannon")
        )
        await upsert_card(session, Card(game="riftbound", remote_id="ogn-030", name="Viktor"))
        await session.commit()


class TestListCards:
    async def test_envelope_shape(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards")

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["limit"] == 20
        assert data["total"] == 3
        assert data["totalPages"] == 1
        assert [c["name"] for c in data["data"]] == [
            "Annie, Fiery",
            "Jinx, the Loose Cannon",
            "Viktor",
        ]

    async def test_search_jinx(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards", params={"search": "jinx", "page": 1, "limit": 20})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["totalPages"] == 1
        assert len(data["data"]) == 1
        assert data["data"][0]["remoteId"] == "ogn-017"

    async def test_search_case_insensitive(self, client: AsyncClient, seeded_db) -> None:
        lower = (await client.get("/cards", params={"search": "ann"})).json()
        upper = (await client.get("/cards", params={"search": "ANNIE"})).json()

        assert [c["name"] for c in lower["data"]] == ["Annie, Fiery", "Jinx, the Loose Cannon"]
        assert [c["name"] for c in upper["data"]] == ["Annie, Fiery"]

    async def test_invalid_pagination_is_lenient(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards", params={"page": "abc", "limit": "lots"})

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["limit"] == 20

    async def test_non_ascii_digits_are_lenient(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards", params={"page": "²", "limit": "³"})

        assert response.status_code == 200
        data = response.json()
        assert data["page"] == 1
        assert data["limit"] == 20

    async def test_oversized_limit_is_clamped(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards", params={"limit": "9" * 5000})

        assert response.status_code == 200
        assert response.json()["limit"] == 100

    async def test_limit_clamped(self, client: AsyncClient, seeded_db) -> None:
        data = (await client.get("/cards", params={"page": "2", "limit": "1"})).json()

        assert data["page"] == 2
        assert data["limit"] == 1
        assert data["totalPages"] == 3
        assert [c["name"] for c in data["data"]] == ["Jinx, the Loose Cannon"]

    async def test_empty_store(self, client: AsyncClient) -> None:
        data = (await client.get("/cards")).json()

        assert data["total"] == 0
        assert data["totalPages"] == 1
        assert data["data"] == []

    async def test_cards_use_camel_case_keys(self, client: AsyncClient, seeded_db) -> None:
        card = (await client.get("/cards", params={"search": "annie"})).json()["data"][0]

        assert card["cleanName"] == "Annie Fiery"
        assert card["cardType"] == "Champion Unit"
        assert card["set"]["releaseDate"] == "2025-10-31"
        assert card["presaleInfo"]["isPresale"] is False
        assert card["raw"]["extraField"] == {"nested": [1, 2, 3]}


class TestGetCard:
    async def test_get_card_with_slash_in_id(
        self, client: AsyncClient, seeded_db, catalog_card: dict[str, Any]
    ) -> None:
        response = await client.get(f"/cards/{catalog_card['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["remoteId"] == "origins-proving-grounds-001/024"
        assert data["images"]["small"] == "https://cdn.example.com/ogs-001-small.png"
        assert data["tcgplayer"]["id"] == 652771

    async def test_get_card_not_found(self, client: AsyncClient, seeded_db) -> None:
        response = await client.get("/cards/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Card not found"}


class TestStoreFailure:
    async def test_list_returns_500_with_error(self) -> None:
        """A broken store yields a generic error body, never a stack trace."""
        from unittest.mock import AsyncMock

        from sqlalchemy.exc import OperationalError

        async def override_get_session_broken():
            mock_session = AsyncMock()
            mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
            yield mock_session

        app.dependency_overrides[get_session] = override_get_session_broken

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            listing = await client.get("/cards")
            single = await client.get("/cards/anything")

        app.dependency_overrides.clear()

        assert listing.status_code == 500
        assert listing.json() == {"error": "Failed to fetch cards"}
        assert single.status_code == 500
        assert single.json() == {"error": "Failed to fetch card"}
