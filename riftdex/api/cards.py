"""
Card API endpoints.

Read-only listing, search, and lookup over the card catalog.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from riftdex.api.deps import get_card_query_service
from riftdex.models.card import Card, CardPage
from riftdex.services.card_query import CardQueryService

router = APIRouter(prefix="/cards", tags=["cards"])

CARD_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"description": "Card not found"},
    500: {"description": "Store failure"},
}


@router.get("", response_model=CardPage)
async def list_cards(
    service: Annotated[CardQueryService, Depends(get_card_query_service)],
    # Raw strings: bad values fall back to defaults instead of a 422
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Page size, 1-100")] = None,
    search: Annotated[str | None, Query(description="Substring of name, clean name or code")] = None,
) -> CardPage:
    """
    List cards ordered by name.

    Example: GET /cards?page=1&limit=20&search=annie
    """
    return await service.list_cards(search=search, page=page, limit=limit)


@router.get("/{remote_id:path}", response_model=Card, responses=CARD_ERROR_RESPONSES)
async def get_card(
    remote_id: str,
    service: Annotated[CardQueryService, Depends(get_card_query_service)],
) -> Card:
    """
    Get a single card by its catalog id.

    Catalog ids can contain slashes (e.g. "origins-proving-grounds-001/024").
    """
    return await service.get_card(remote_id)
