from pydantic import BaseModel


class PublicUser(BaseModel):
    """The user fields safe to return to clients. Never includes the hash."""

    id: int
    name: str
    email: str


class AuthResult(BaseModel):
    """Issued session token plus the user it belongs to."""

    token: str
    user: PublicUser


class TokenClaims(BaseModel):
    """Verified contents of a session token."""

    user_id: int
    email: str
