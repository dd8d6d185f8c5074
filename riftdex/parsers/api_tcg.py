"""
API TCG catalog parser.

Maps card records from the apitcg.com catalog into the local Card shape.
Missing nested fields become None; the full record is kept in ``raw``.
"""

from typing import Any

from riftdex.models.card import Card, CardImages, CardSet, PresaleInfo, TcgPlayerInfo


def _text(value: Any) -> str | None:
    """Stringify scalar values; empty and missing become None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float, str)):
        return str(value)
    return None


def _group(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def _int(value: Any) -> int | None:
    """Parse marketplace ids, which arrive as numbers or numeric strings."""
    if isinstance(value, bool) or value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_card(payload: dict[str, Any], game: str) -> Card:
    """
    Map one catalog record into a Card.

    Args:
        payload: Card object from the catalog's ``data`` list
        game: Catalog tag stored on the card

    Returns:
        Card keyed by (game, payload["id"])

    Raises:
        ValueError: If the record has no id
    """
    remote_id = _text(payload.get("id"))
    if remote_id is None:
        raise ValueError("Catalog card has no id")

    images = _group(payload, "images")
    card_set = _group(payload, "set")
    tcgplayer = _group(payload, "tcgplayer")
    presale = _group(payload, "presaleInfo")
    is_presale = presale.get("isPresale")

    return Card(
        game=game,
        remote_id=remote_id,
        code=_text(payload.get("code")),
        number=_text(payload.get("number")),
        name=_text(payload.get("name")),
        clean_name=_text(payload.get("cleanName")),
        rarity=_text(payload.get("rarity")),
        card_type=_text(payload.get("cardType")),
        domain=_text(payload.get("domain")),
        energy_cost=_text(payload.get("energyCost")),
        power_cost=_text(payload.get("powerCost")),
        might=_text(payload.get("might")),
        description=_text(payload.get("description")),
        flavor_text=_text(payload.get("flavorText")),
        images=CardImages(small=_text(images.get("small")), large=_text(images.get("large"))),
        card_set=CardSet(
            id=_text(card_set.get("id")),
            name=_text(card_set.get("name")),
            release_date=_text(card_set.get("releaseDate")),
        ),
        tcgplayer=TcgPlayerInfo(id=_int(tcgplayer.get("id")), url=_text(tcgplayer.get("url"))),
        presale_info=PresaleInfo(
            is_presale=is_presale if isinstance(is_presale, bool) else None,
            released_on=_text(presale.get("releasedOn")),
            note=_text(presale.get("note")),
        ),
        modified_on=_text(payload.get("modifiedOn")),
        raw=payload,
    )


def parse_page(payload: dict[str, Any], game: str) -> tuple[list[Card], int]:
    """
    Parse one catalog response page.

    Returns:
        Tuple of (cards, total_pages); total_pages defaults to 1
    """
    total_pages = _int(payload.get("totalPages")) or 1
    records = payload.get("data") or []
    return [parse_card(record, game) for record in records], total_pages
