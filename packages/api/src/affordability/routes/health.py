# This project was developed with assistance from AI tools.
"""Health check routes."""

from db import get_db_service
from fastapi import APIRouter
from pydantic import BaseModel

from .. import __version__

router = APIRouter()


class ServiceHealth(BaseModel):
    name: str
    status: str
    version: str | None = None


@router.get("/", response_model=list[ServiceHealth])
async def health() -> list[ServiceHealth]:
    """Report the API and database status."""
    db_ok = await get_db_service().health_check()
    return [
        ServiceHealth(name="API", status="healthy", version=__version__),
        ServiceHealth(name="Database", status="healthy" if db_ok else "unhealthy"),
    ]
