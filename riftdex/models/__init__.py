from riftdex.models.card import (
    Card,
    CardImages,
    CardPage,
    CardSet,
    PresaleInfo,
    TcgPlayerInfo,
)
from riftdex.models.errors import (
    AuthenticationError,
    ConflictError,
    InternalError,
    NotFoundError,
    RiftdexError,
    ValidationError,
)
from riftdex.models.user import AuthResult, PublicUser, TokenClaims

__all__ = [
    "AuthResult",
    "AuthenticationError",
    "Card",
    "CardImages",
    "CardPage",
    "CardSet",
    "ConflictError",
    "InternalError",
    "NotFoundError",
    "PresaleInfo",
    "PublicUser",
    "RiftdexError",
    "TcgPlayerInfo",
    "TokenClaims",
    "ValidationError",
]
