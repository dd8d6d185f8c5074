"""
Health check endpoints.

Provides a root banner and a liveness probe that reports store connectivity.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from riftdex.db.database import get_session, ping

router = APIRouter(tags=["health"])

# Mounted only when the built client is not served from /
root_router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    # Field name the web client reads
    store_connected: bool = Field(alias="mongoConnected")


class RootResponse(BaseModel):
    status: str
    message: str


@root_router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    return RootResponse(status="ok", message="Riftbound API root")


@router.get("/health", response_model=HealthResponse)
async def health(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """
    Liveness probe.

    Always 200 while the process is up; the body says whether the store
    answers queries.
    """
    return HealthResponse(status="ok", store_connected=await ping(session))
