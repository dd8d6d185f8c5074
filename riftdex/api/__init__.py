from riftdex.api.auth import router as auth_router
from riftdex.api.cards import router as cards_router
from riftdex.api.health import root_router
from riftdex.api.health import router as health_router

__all__ = [
    "auth_router",
    "cards_router",
    "health_router",
    "root_router",
]
