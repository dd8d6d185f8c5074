"""
Card API models.

Field names are snake_case in Python and camelCase on the wire, matching
the catalog document shape the web client reads.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CardImages(CamelModel):
    small: str | None = None
    large: str | None = None


class CardSet(CamelModel):
    id: str | None = None
    name: str | None = None
    release_date: str | None = None


class TcgPlayerInfo(CamelModel):
    """Marketplace listing for the card."""

    id: int | None = None
    url: str | None = None


class PresaleInfo(CamelModel):
    is_presale: bool | None = None
    released_on: str | None = None
    note: str | None = None


class Card(CamelModel):
    """
    A card in a specific game's catalog.

    Attributes:
        game: Catalog tag (e.g., "riftbound")
        remote_id: The source catalog's stable card id
        raw: Complete original source payload, kept verbatim
    """

    game: str
    remote_id: str

    code: str | None = None
    number: str | None = None
    name: str | None = None
    clean_name: str | None = None

    rarity: str | None = None
    card_type: str | None = None
    domain: str | None = None
    energy_cost: str | None = None
    power_cost: str | None = None
    might: str | None = None

    description: str | None = None
    flavor_text: str | None = None

    images: CardImages | None = None
    card_set: CardSet | None = Field(default=None, alias="set")
    tcgplayer: TcgPlayerInfo | None = None
    presale_info: PresaleInfo | None = None

    modified_on: str | None = None
    raw: dict[str, Any] | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None


class CardPage(CamelModel):
    """Paginated list of cards."""

    page: int
    limit: int
    total: int
    total_pages: int
    data: list[Card] = Field(default_factory=list)
