"""
Password hashing and session tokens.

Passwords are hashed with bcrypt (salted, slow, constant-time check).
Session tokens are HS256 JWTs carrying the user id and an expiry; a token
is valid only while its signature verifies and the expiry is in the future.
There is no server-side revocation.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from riftdex.models.errors import AuthenticationError
from riftdex.models.user import TokenClaims

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _utcnow() -> datetime:
    return datetime.now(UTC)


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a fresh salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash."""
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))


async def hash_password_async(password: str, rounds: int = 12) -> str:
    """Hash off the event loop; bcrypt is deliberately slow."""
    return await asyncio.to_thread(hash_password, password, rounds)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, password, password_hash)


class TokenService:
    """
    Issues and verifies signed session tokens.

    Args:
        secret: Signing key
        algorithm: JWT algorithm (HMAC family)
        ttl: How long an issued token stays valid
        clock: Returns the current time; override in tests
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self.clock = clock

    def issue(self, user_id: int, email: str) -> str:
        """Create a token for a user, expiring ``ttl`` from now."""
        issued_at = self.clock()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> TokenClaims:
        """
        Validate a token's signature and expiry.

        Raises:
            AuthenticationError: If the token is missing, malformed,
                signed with another key, or expired
        """
        if not token:
            raise AuthenticationError("Missing token")

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                # Expiry is checked below against the injected clock
                options={"require": ["sub", "exp"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("Invalid token") from e

        try:
            expires_at = int(payload["exp"])
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise AuthenticationError("Invalid token") from e

        if self.clock().timestamp() >= expires_at:
            raise AuthenticationError("Token expired")

        return TokenClaims(user_id=user_id, email=str(payload.get("email", "")))
