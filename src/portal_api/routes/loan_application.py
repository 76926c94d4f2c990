# This project was developed with assistance from AI tools.
"""Save endpoint posted by the borrower application form."""

import logging

from fastapi import APIRouter, Depends, Request
from portal_db import DatabaseService, get_db_service
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from ..core.config import settings
from ..middleware.auth import CurrentUser
from ..schemas.application import SaveApplicationResult
from ..services.graph_builder import build_application_graph
from ..services.writer import ApplicationWriter

logger = logging.getLogger(__name__)

router = APIRouter()

SAVE_FAILED = "Unable to save loan application"


def get_application_writer(
    db_service: DatabaseService = Depends(get_db_service),
) -> ApplicationWriter:
    """FastAPI dependency: a writer bound to the app's session factory."""
    return ApplicationWriter(db_service.session_factory)


async def _read_form(request: Request) -> tuple[dict[str, str], int]:
    """Text fields of the posted form, plus the number of file parts skipped."""
    fields: dict[str, str] = {}
    attachments = 0
    async with request.form() as form:
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                attachments += 1
                continue
            fields[key] = value
    return fields, attachments


@router.post(
    "/saveLoanApplication",
    response_model=SaveApplicationResult,
    response_model_exclude_none=True,
)
async def save_loan_application(
    request: Request,
    user: CurrentUser,
    writer: ApplicationWriter = Depends(get_application_writer),
) -> SaveApplicationResult:
    """Normalize the posted form and store it as a new application graph.

    Always answers 200: the form script only looks at ``success``. Uploaded
    ``loanDocs`` are counted and dropped; document storage has its own flow.
    A body that does not parse, or carries no fields, is not saved.
    """
    try:
        fields, attachments = await _read_form(request)
    except (HTTPException, MultiPartException) as exc:
        logger.warning("Unreadable save body from user=%s: %s", user.user_id, exc)
        return SaveApplicationResult(success=False, error=SAVE_FAILED)

    if not fields:
        logger.warning("Save with no form fields from user=%s", user.user_id)
        return SaveApplicationResult(success=False, error=SAVE_FAILED)

    if attachments:
        logger.info("Ignoring %d attachment(s) on save for user=%s", attachments, user.user_id)

    try:
        graph = build_application_graph(
            fields, user.user_id, policy=settings.UNRECOGNIZED_CODE_POLICY
        )
        application_id = await writer.write(graph)
    except Exception:
        logger.exception("Loan application save failed for user=%s", user.user_id)
        return SaveApplicationResult(success=False, error=SAVE_FAILED)

    return SaveApplicationResult(success=True, applicationId=application_id)
