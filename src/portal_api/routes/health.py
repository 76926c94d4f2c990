# This project was developed with assistance from AI tools.
"""Liveness and database connectivity."""

from fastapi import APIRouter, Depends
from portal_db import DatabaseService, get_db_service

from .. import __version__
from ..schemas.health import ComponentHealth

router = APIRouter()


@router.get("/", response_model=list[ComponentHealth])
async def health(
    db_service: DatabaseService = Depends(get_db_service),
) -> list[ComponentHealth]:
    backend = db_service.engine.dialect.name
    db_ok = await db_service.health_check()
    return [
        ComponentHealth(
            name="API", status="healthy", message="API is running", version=__version__
        ),
        ComponentHealth(
            name="Database",
            status="healthy" if db_ok else "unhealthy",
            message=f"{backend} connection {'ok' if db_ok else 'failed'}",
        ),
    ]
