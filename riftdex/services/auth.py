"""
Account registration, login, and token verification.

Unknown emails and wrong passwords produce the same error so callers cannot
probe which accounts exist.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.config import MIN_PASSWORD_LENGTH
from riftdex.db.operations import (
    create_user,
    get_user,
    get_user_by_email,
    normalize_email,
    user_to_model,
)
from riftdex.models.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from riftdex.models.user import AuthResult, PublicUser, TokenClaims
from riftdex.services.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    TokenService,
    hash_password_async,
    verify_password_async,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Email/password authentication backed by the user store.

    Args:
        session: Database session for user reads and writes
        tokens: Issues and verifies session tokens
        bcrypt_rounds: Cost factor for new password hashes
    """

    def __init__(self, session: AsyncSession, tokens: TokenService, bcrypt_rounds: int = 12):
        self.session = session
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    async def register(
        self, name: str | None, email: str | None, password: str | None
    ) -> AuthResult:
        """
        Create an account and sign it in.

        Raises:
            ValidationError: Missing name, email or password, or a password
                shorter than the minimum length
            ConflictError: The normalized email is already registered
        """
        name = (name or "").strip()
        email = normalize_email(email or "")
        if not name or not email or not password:
            raise ValidationError("Name, email and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")

        if await get_user_by_email(self.session, email) is not None:
            logger.info("Registration rejected: email already registered")
            raise ConflictError("Email already registered")

        password_hash = await hash_password_async(password, self.bcrypt_rounds)

        # The unique index is the real guard against concurrent registrations
        try:
            user = await create_user(self.session, name, email, password_hash)
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("Registration lost a race on a duplicate email")
            raise ConflictError("Email already registered") from e

        logger.info("Registered user %d", user.id)
        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user_to_model(user))

    async def login(self, email: str | None, password: str | None) -> AuthResult:
        """
        Check credentials and issue a token.

        Raises:
            ValidationError: Missing email or password
            AuthenticationError: Unknown email or wrong password
        """
        if not email or not email.strip() or not password:
            raise ValidationError("Email and password are required")

        user = await get_user_by_email(self.session, email)
        if user is None or not await verify_password_async(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return AuthResult(token=self.tokens.issue(user.id, user.email), user=user_to_model(user))

    def verify(self, token: str | None) -> TokenClaims:
        """
        Validate a session token.

        Raises:
            AuthenticationError: Missing, malformed, expired, or foreign token
        """
        return self.tokens.verify(token)

    async def current_user(self, token: str | None) -> PublicUser:
        """
        Resolve the user a token was issued to.

        Raises:
            AuthenticationError: If the token is not valid
            NotFoundError: If the account no longer exists
        """
        claims = self.verify(token)
        user = await get_user(self.session, claims.user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user_to_model(user)
