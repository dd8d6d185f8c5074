from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Riftdex"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/riftbound_local"
    # Seconds to wait when opening a store connection
    database_timeout: float = 10.0

    host: str = "0.0.0.0"
    port: int = 3000

    # Local development fallback only; set JWT_SECRET in any deployed environment
    jwt_secret: str = "changemepls"
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 7
    bcrypt_rounds: int = 12

    # Every card belongs to this catalog
    catalog_game: str = "riftbound"

    api_tcg_url: str = "https://apitcg.com/api/riftbound/cards"
    api_tcg_key: str = ""
    api_tcg_timeout: float = 30.0

    # Built web client, served from / when set (production)
    client_dist_dir: str | None = None

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the process settings; override in tests."""
    return settings


# =============================================================================
# PAGINATION LIMITS
# =============================================================================

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

MIN_PASSWORD_LENGTH = 6
