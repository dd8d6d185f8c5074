"""
Card query service.

Paginated, optionally searched listings over one catalog, plus single-card
lookup. Read-only.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.db.operations import card_to_model, count_cards, get_card, list_cards
from riftdex.models.card import Card, CardPage
from riftdex.models.errors import InternalError, NotFoundError
from riftdex.services.pagination import PageRequest, total_pages

logger = logging.getLogger(__name__)


class CardQueryService:
    """
    Reads cards for a single catalog.

    Args:
        session: Database session used for every query
        game: Catalog tag all queries are restricted to
    """

    def __init__(self, session: AsyncSession, game: str):
        self.session = session
        self.game = game

    async def list_cards(
        self,
        search: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> CardPage:
        """
        List one page of cards, ordered by name.

        Page and limit are normalized leniently (see pagination). A search
        term is trimmed; if anything remains, cards must contain it in
        name, clean name, or code, ignoring case.

        Raises:
            InternalError: If the store query fails
        """
        window = PageRequest.from_query(page, limit)
        term = (search or "").strip() or None

        try:
            total = await count_cards(self.session, self.game, term)
            rows = await list_cards(
                self.session, self.game, term, offset=window.offset, limit=window.limit
            )
        except SQLAlchemyError as e:
            logger.error("Card listing failed (search=%r, page=%d): %s", term, window.page, e)
            raise InternalError("Failed to fetch cards") from e

        return CardPage(
            page=window.page,
            limit=window.limit,
            total=total,
            total_pages=total_pages(total, window.limit),
            data=[card_to_model(row) for row in rows],
        )

    async def get_card(self, remote_id: str) -> Card:
        """
        Get the full record for one card.

        Raises:
            NotFoundError: If the catalog has no card with this id
            InternalError: If the store query fails
        """
        try:
            row = await get_card(self.session, self.game, remote_id)
        except SQLAlchemyError as e:
            logger.error("Card lookup failed for %s: %s", remote_id, e)
            raise InternalError("Failed to fetch card") from e

        if row is None:
            raise NotFoundError("Card not found")
        return card_to_model(row)
