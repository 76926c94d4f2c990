# This project was developed with assistance from AI tools.
"""Read routes over the caller's saved applications."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from portal_db import get_db
from portal_db.enums import UserRole
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import CurrentUser, require_roles
from ..schemas import Pagination
from ..schemas.application import (
    ApplicationListItem,
    ApplicationListResponse,
    ApplicationSummary,
    LegacyApplicationRecord,
)
from ..services import application as app_service
from ..services.legacy import project_legacy_record

router = APIRouter(
    dependencies=[
        Depends(require_roles(UserRole.ADMIN, UserRole.BORROWER, UserRole.LOAN_OFFICER))
    ]
)


@router.get("/", response_model=ApplicationListResponse)
async def list_applications(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
) -> ApplicationListResponse:
    """The caller's save history, newest first."""
    applications, total = await app_service.list_applications(
        session, user, offset=offset, limit=limit
    )
    return ApplicationListResponse(
        data=[ApplicationListItem.model_validate(app) for app in applications],
        pagination=Pagination(
            total=total,
            offset=offset,
            limit=limit,
            has_more=(offset + limit < total),
        ),
    )


@router.get("/legacy", response_model=LegacyApplicationRecord)
async def get_legacy_record(
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> LegacyApplicationRecord:
    """Flat single-row view of the caller's newest application."""
    app = await app_service.get_latest_application(session, user)
    if app is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No saved application",
        )
    return project_legacy_record(app)


@router.get("/{application_id}", response_model=ApplicationSummary)
async def get_application(
    application_id: int,
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> ApplicationSummary:
    """One saved application graph. Returns 404 for other users' applications."""
    app = await app_service.get_application(session, user, application_id)
    if app is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found",
        )
    return app_service.build_summary(app)
