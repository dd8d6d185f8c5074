"""
Riftdex services.

Business logic for card queries and account authentication.
"""

from riftdex.services.auth import AuthService
from riftdex.services.card_query import CardQueryService
from riftdex.services.pagination import (
    PageRequest,
    normalize_limit,
    normalize_page,
    total_pages,
)
from riftdex.services.security import (
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    "AuthService",
    "CardQueryService",
    "PageRequest",
    "TokenService",
    "hash_password",
    "normalize_limit",
    "normalize_page",
    "total_pages",
    "verify_password",
]
