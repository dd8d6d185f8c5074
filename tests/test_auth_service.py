"""Tests for the authentication service."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.db.operations import get_user_by_email
from riftdex.models.db import UserDB
from riftdex.models.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from riftdex.services.auth import INVALID_CREDENTIALS, AuthService
from riftdex.services.security import TokenService


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret="test-secret")


@pytest.fixture
def auth(session: AsyncSession, tokens: TokenService) -> AuthService:
    return AuthService(session, tokens, bcrypt_rounds=4)


async def user_count(session: AsyncSession) -> int:
    return int(await session.scalar(select(func.count()).select_from(UserDB)) or 0)


class TestRegister:
    async def test_register_returns_token_and_public_user(
        self, auth: AuthService, tokens: TokenService
    ) -> None:
        result = await auth.register("Ann", "ann@x.com", "secret1")

        assert result.user.name == "Ann"
        assert result.user.email == "ann@x.com"
        assert tokens.verify(result.token).user_id == result.user.id

    async def test_register_stores_hash_not_password(
        self, auth: AuthService, session: AsyncSession
    ) -> None:
        await auth.register("Ann", "ann@x.com", "secret1")

        user = await get_user_by_email(session, "ann@x.com")

        assert user is not None
        assert user.password_hash != "secret1"

    async def test_register_normalizes_email(self, auth: AuthService) -> None:
        result = await auth.register("Ann", "  Ann@X.com ", "secret1")

        assert result.user.email == "ann@x.com"

    @pytest.mark.parametrize(
        ("name", "email", "password"),
        [
            (None, "a@x.com", "secret1"),
            ("A", None, "secret1"),
            ("A", "a@x.com", None),
            ("", "a@x.com", "secret1"),
            ("A", "   ", "secret1"),
        ],
    )
    async def test_missing_fields_rejected(
        self, auth: AuthService, session: AsyncSession, name, email, password
    ) -> None:
        with pytest.raises(ValidationError, match="required"):
            await auth.register(name, email, password)

        assert await user_count(session) == 0

    async def test_short_password_rejected(self, auth: AuthService, session: AsyncSession) -> None:
        with pytest.raises(ValidationError, match="at least 6"):
            await auth.register("A", "a@x.com", "short")

        assert await user_count(session) == 0

    async def test_six_character_password_accepted(self, auth: AuthService) -> None:
        result = await auth.register("A", "a@x.com", "sixsix")

        assert result.user.email == "a@x.com"

    async def test_duplicate_email_differing_in_case_rejected(
        self, auth: AuthService, session: AsyncSession
    ) -> None:
        await auth.register("A", "a@x.com", "secret1")
        await session.commit()

        with pytest.raises(ConflictError):
            await auth.register("B", "  A@X.COM ", "secret2")

    async def test_lost_race_reports_conflict(
        self, auth: AuthService, session: AsyncSession
    ) -> None:
        """The unique index stops a duplicate that slipped past the existence check."""
        await auth.register("A", "race@x.com", "secret1")
        await session.commit()

        with patch(
            "riftdex.services.auth.get_user_by_email",
            new_callable=AsyncMock,
            return_value=None,
        ):
            with pytest.raises(ConflictError):
                await auth.register("B", "race@x.com", "secret2")

        assert await user_count(session) == 1


class TestLogin:
    @pytest.fixture
    async def registered(self, auth: AuthService, session: AsyncSession) -> None:
        await auth.register("Ann", "ann@x.com", "secret1")
        await session.commit()

    async def test_login_success(self, auth: AuthService, registered, tokens) -> None:
        result = await auth.login("ANN@x.com ", "secret1")

        assert result.user.email == "ann@x.com"
        assert tokens.verify(result.token).email == "ann@x.com"

    async def test_wrong_password_and_unknown_email_are_identical(
        self, auth: AuthService, registered
    ) -> None:
        with pytest.raises(AuthenticationError) as wrong_password:
            await auth.login("ann@x.com", "wrong-password")
        with pytest.raises(AuthenticationError) as unknown_email:
            await auth.login("nobody@x.com", "secret1")

        assert wrong_password.value.message == unknown_email.value.message == INVALID_CREDENTIALS
        assert wrong_password.value.status_code == unknown_email.value.status_code == 401

    @pytest.mark.parametrize(("email", "password"), [(None, "x"), ("a@x.com", None), ("", "")])
    async def test_missing_fields_rejected(self, auth: AuthService, email, password) -> None:
        with pytest.raises(ValidationError):
            await auth.login(email, password)


class TestCurrentUser:
    async def test_resolves_user(self, auth: AuthService) -> None:
        result = await auth.register("Ann", "ann@x.com", "secret1")

        user = await auth.current_user(result.token)

        assert user == result.user

    async def test_missing_token(self, auth: AuthService) -> None:
        with pytest.raises(AuthenticationError):
            await auth.current_user(None)

    async def test_user_gone(self, auth: AuthService, tokens: TokenService) -> None:
        token = tokens.issue(12345, "ghost@x.com")

        with pytest.raises(NotFoundError):
            await auth.current_user(token)

    async def test_expired_token(self, session: AsyncSession) -> None:
        issued = datetime(2026, 1, 1, tzinfo=UTC)
        now = {"value": issued}
        tokens = TokenService(secret="test-secret", clock=lambda: now["value"])
        auth = AuthService(session, tokens, bcrypt_rounds=4)
        result = await auth.register("Ann", "ann@x.com", "secret1")

        now["value"] = issued + timedelta(days=7, seconds=1)

        with pytest.raises(AuthenticationError, match="expired"):
            await auth.current_user(result.token)
