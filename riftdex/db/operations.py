"""
Database CRUD operations.

Provides async functions for reading and upserting catalog cards and for
creating and looking up user accounts.
"""

from typing import Any

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.models.card import Card, CardImages, CardSet, PresaleInfo, TcgPlayerInfo
from riftdex.models.db import CardDB, UserDB
from riftdex.models.user import PublicUser

# --- Card Operations ---

LIKE_ESCAPE = "\\"

# Columns written by an upsert; identity columns and timestamps excluded
_CARD_COLUMNS = (
    "code",
    "number",
    "name",
    "clean_name",
    "rarity",
    "card_type",
    "domain",
    "energy_cost",
    "power_cost",
    "might",
    "description",
    "flavor_text",
    "images",
    "set",
    "tcgplayer",
    "presale_info",
    "modified_on",
    "raw",
)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def card_filter(game: str, search: str | None = None) -> list[ColumnElement[bool]]:
    """
    Build WHERE clauses for a card listing.

    Always restricts to the catalog. With a search term, also requires a
    case-insensitive substring match on name, clean name, or code.
    """
    clauses: list[ColumnElement[bool]] = [CardDB.game == game]
    if search:
        pattern = f"%{escape_like(search)}%"
        clauses.append(
            or_(
                CardDB.name.ilike(pattern, escape=LIKE_ESCAPE),
                CardDB.clean_name.ilike(pattern, escape=LIKE_ESCAPE),
                CardDB.code.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    return clauses


async def count_cards(session: AsyncSession, game: str, search: str | None = None) -> int:
    """Count cards in a catalog matching an optional search term."""
    result = await session.execute(
        select(func.count()).select_from(CardDB).where(*card_filter(game, search))
    )
    return int(result.scalar_one())


async def list_cards(
    session: AsyncSession,
    game: str,
    search: str | None = None,
    offset: int = 0,
    limit: int = 20,
) -> list[CardDB]:
    """
    Get a window of cards ordered by name.

    Ties on name are broken by remote id so pages never overlap.
    """
    result = await session.execute(
        select(CardDB)
        .where(*card_filter(game, search))
        .order_by(CardDB.name.asc(), CardDB.remote_id.asc())
        .offset(offset)
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_card(session: AsyncSession, game: str, remote_id: str) -> CardDB | None:
    """
    Get a card by its catalog key.

    Returns None if no such card exists.
    """
    result = await session.execute(
        select(CardDB).where(CardDB.game == game, CardDB.remote_id == remote_id)
    )
    return result.scalar_one_or_none()


def _card_values(card: Card) -> dict[str, Any]:
    """Flatten a Card into column values."""

    def dump(group: CardImages | CardSet | TcgPlayerInfo | PresaleInfo | None) -> Any:
        return group.model_dump(by_alias=True) if group is not None else None

    return {
        "code": card.code,
        "number": card.number,
        "name": card.name,
        "clean_name": card.clean_name,
        "rarity": card.rarity,
        "card_type": card.card_type,
        "domain": card.domain,
        "energy_cost": card.energy_cost,
        "power_cost": card.power_cost,
        "might": card.might,
        "description": card.description,
        "flavor_text": card.flavor_text,
        "images": dump(card.images),
        "set": dump(card.card_set),
        "tcgplayer": dump(card.tcgplayer),
        "presale_info": dump(card.presale_info),
        "modified_on": card.modified_on,
        "raw": card.raw,
    }


async def upsert_card(session: AsyncSession, card: Card) -> None:
    """
    Insert or overwrite a card by (game, remote_id).

    On PostgreSQL and SQLite this is a single INSERT ... ON CONFLICT DO
    UPDATE, so concurrent writers for the same key cannot create
    duplicates. Other dialects fall back to select-then-write, still
    guarded by the unique constraint.
    """
    values = _card_values(card)
    dialect = session.get_bind().dialect.name

    if dialect in ("postgresql", "sqlite"):
        insert = postgresql.insert if dialect == "postgresql" else sqlite.insert
        table = CardDB.__table__
        stmt = insert(table).values(game=card.game, remote_id=card.remote_id, **values)
        update = {column: stmt.excluded[column] for column in _CARD_COLUMNS}
        update["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.game, table.c.remote_id],
            set_=update,
        )
        await session.execute(stmt)
        return

    existing = await get_card(session, card.game, card.remote_id)
    if existing is None:
        existing = CardDB(game=card.game, remote_id=card.remote_id)
        session.add(existing)
    for column, value in values.items():
        setattr(existing, "card_set" if column == "set" else column, value)
    await session.flush()


def card_to_model(db_card: CardDB) -> Card:
    """Convert a database card to an API model."""
    return Card(
        game=db_card.game,
        remote_id=db_card.remote_id,
        code=db_card.code,
        number=db_card.number,
        name=db_card.name,
        clean_name=db_card.clean_name,
        rarity=db_card.rarity,
        card_type=db_card.card_type,
        domain=db_card.domain,
        energy_cost=db_card.energy_cost,
        power_cost=db_card.power_cost,
        might=db_card.might,
        description=db_card.description,
        flavor_text=db_card.flavor_text,
        images=CardImages.model_validate(db_card.images) if db_card.images else None,
        card_set=CardSet.model_validate(db_card.card_set) if db_card.card_set else None,
        tcgplayer=TcgPlayerInfo.model_validate(db_card.tcgplayer) if db_card.tcgplayer else None,
        presale_info=(
            PresaleInfo.model_validate(db_card.presale_info) if db_card.presale_info else None
        ),
        modified_on=db_card.modified_on,
        raw=db_card.raw,
        created_at=db_card.created_at,
        updated_at=db_card.updated_at,
    )


# --- User Operations ---


def normalize_email(email: str) -> str:
    """Trim and lower-case an email before storage or comparison."""
    return email.strip().lower()


async def get_user_by_email(session: AsyncSession, email: str) -> UserDB | None:
    """Get a user by email, normalizing it first."""
    result = await session.execute(select(UserDB).where(UserDB.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def get_user(session: AsyncSession, user_id: int) -> UserDB | None:
    """Get a user by primary key."""
    return await session.get(UserDB, user_id)


async def create_user(session: AsyncSession, name: str, email: str, password_hash: str) -> UserDB:
    """
    Create a new user.

    Raises IntegrityError if the normalized email is already registered.
    """
    user = UserDB(name=name, email=normalize_email(email), password_hash=password_hash)
    session.add(user)
    await session.flush()
    return user


def user_to_model(user: UserDB) -> PublicUser:
    """Convert a database user to its public view."""
    return PublicUser(id=user.id, name=user.name, email=user.email)
