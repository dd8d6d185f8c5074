from riftdex.db.database import get_session, init_db, ping
from riftdex.db.operations import (
    card_to_model,
    count_cards,
    create_user,
    get_card,
    get_user,
    get_user_by_email,
    list_cards,
    normalize_email,
    upsert_card,
    user_to_model,
)

__all__ = [
    "card_to_model",
    "count_cards",
    "create_user",
    "get_card",
    "get_session",
    "get_user",
    "get_user_by_email",
    "init_db",
    "list_cards",
    "normalize_email",
    "ping",
    "upsert_card",
    "user_to_model",
]
