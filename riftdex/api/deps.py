"""
Request-scoped service wiring.

Services are built per request from the session and settings dependencies,
so tests swap the store or the signing secret with dependency overrides.
"""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.config import Settings, get_settings
from riftdex.db.database import get_session
from riftdex.services.auth import AuthService
from riftdex.services.card_query import CardQueryService
from riftdex.services.security import TokenService

# auto_error=False so a missing header reaches AuthService and gets our 401 body
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(days=settings.token_ttl_days),
    )


def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(session, tokens, bcrypt_rounds=settings.bcrypt_rounds)


def get_card_query_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CardQueryService:
    return CardQueryService(session, game=settings.catalog_game)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Token from ``Authorization: Bearer <token>``, or None."""
    return credentials.credentials if credentials else None
