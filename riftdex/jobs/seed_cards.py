"""
Seed the card store from the remote catalog.

Walks the catalog page by page and upserts every card by (game, remote_id).
Runs as a standalone script; any error aborts the run.
"""

import asyncio
import logging
import sys

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from riftdex.config import Settings, settings
from riftdex.db.database import build_engine, build_session_factory, init_db
from riftdex.db.operations import upsert_card
from riftdex.parsers.api_tcg import parse_page
from riftdex.services.catalog import build_catalog_client, fetch_catalog_page

logger = logging.getLogger(__name__)


async def ingest_catalog(
    session_factory: async_sessionmaker[AsyncSession],
    client: httpx.AsyncClient,
    url: str,
    game: str,
) -> int:
    """
    Fetch every catalog page in order and upsert its cards.

    The page count is re-read from each response. Each page is committed
    before the next is requested.

    Returns:
        Number of cards upserted
    """
    page = 1
    total_pages = 1
    upserts = 0

    while page <= total_pages:
        logger.info("Fetching page %d...", page)
        payload = await fetch_catalog_page(client, url, page)
        cards, total_pages = parse_page(payload, game)
        logger.info("Page %d/%d - %d cards", page, total_pages, len(cards))

        async with session_factory() as session:
            for card in cards:
                await upsert_card(session, card)
            await session.commit()

        upserts += len(cards)
        page += 1

    return upserts


async def run_seed(config: Settings = settings) -> int:
    """
    Seed the configured store from the configured catalog.

    Opens its own engine on ``config.database_url`` and disposes it when
    the run ends.

    Returns:
        Number of cards upserted
    """
    engine = build_engine(config)
    try:
        await init_db(engine)
        async with build_catalog_client(config.api_tcg_key, config.api_tcg_timeout) as client:
            count = await ingest_catalog(
                build_session_factory(engine), client, config.api_tcg_url, config.catalog_game
            )
    except Exception as e:
        logger.error("Seed failed: %s", e)
        raise
    finally:
        await engine.dispose()

    logger.info("Done. Total upserts: %d", count)
    return count


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not settings.api_tcg_key:
        logger.error("Missing API_TCG_KEY in environment")
        sys.exit(1)

    try:
        asyncio.run(run_seed())
    except Exception:
        sys.exit(1)


if __name__ == "__main__":
    main()
