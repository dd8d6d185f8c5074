"""
SQLAlchemy ORM models for persistent storage.

Cards keep their nested groups and the verbatim source payload as JSON
so the stored record has the same shape as the catalog document.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CardDB(Base):
    """
    A catalog card.

    One row per (game, remote_id). The unique constraint is the only
    duplicate guard; ingestion upserts rely on it.
    """

    __tablename__ = "cards"
    __table_args__ = (
        UniqueConstraint("game", "remote_id", name="uq_card_game_remote_id"),
        Index("ix_cards_game_name", "game", "name"),
        Index("ix_cards_game_clean_name", "game", "clean_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game: Mapped[str] = mapped_column(String(50))
    remote_id: Mapped[str] = mapped_column(String(255))

    code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    clean_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    rarity: Mapped[str | None] = mapped_column(String(50), nullable=True)
    card_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    domain: Mapped[str | None] = mapped_column(String(100), nullable=True)
    energy_cost: Mapped[str | None] = mapped_column(String(20), nullable=True)
    power_cost: Mapped[str | None] = mapped_column(String(20), nullable=True)
    might: Mapped[str | None] = mapped_column(String(20), nullable=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    flavor_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Nested groups
    images: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    card_set: Mapped[dict[str, Any] | None] = mapped_column("set", JSON, nullable=True)
    tcgplayer: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    presale_info: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    modified_on: Mapped[str | None] = mapped_column(String(64), nullable=True)
    raw: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<CardDB(game={self.game}, remote_id={self.remote_id}, name={self.name})>"


class UserDB(Base):
    """
    A registered account.

    Email is stored normalized (trimmed, lower-cased) so the unique
    constraint also rejects case and whitespace variants.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    password_hash: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<UserDB(id={self.id}, email={self.email})>"
