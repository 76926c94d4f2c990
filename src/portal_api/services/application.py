# This project was developed with assistance from AI tools.
"""Read side of the saved application history.

Every query is scoped to the caller's user id: a borrower only ever sees the
applications they submitted.
"""

import logging

from portal_db import (
    ApplicationBorrower,
    Borrower,
    BorrowerDemographics,
    BorrowerEmployment,
    LoanApplication,
    PropertyOwned,
    SubjectProperty,
)
from portal_db.enums import BorrowerRole
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..schemas.application import ApplicationSummary, BorrowerSummary, SubjectPropertySummary
from ..schemas.auth import UserContext

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (LoanApplication.created_at.desc(), LoanApplication.id.desc())

_GRAPH_OPTIONS = (
    selectinload(LoanApplication.application_borrowers)
    .selectinload(ApplicationBorrower.borrower)
    .options(
        selectinload(Borrower.dependents),
        selectinload(Borrower.addresses),
        selectinload(Borrower.employments).selectinload(BorrowerEmployment.income_breakdowns),
        selectinload(Borrower.other_incomes),
        selectinload(Borrower.asset_accounts),
        selectinload(Borrower.asset_credit_others),
        selectinload(Borrower.liabilities),
        selectinload(Borrower.other_liability_expenses),
        selectinload(Borrower.properties_owned).selectinload(PropertyOwned.mortgage),
        selectinload(Borrower.declaration),
        selectinload(Borrower.military_service),
        selectinload(Borrower.demographics).options(
            selectinload(BorrowerDemographics.ethnicities),
            selectinload(BorrowerDemographics.ethnicity_details),
            selectinload(BorrowerDemographics.races),
            selectinload(BorrowerDemographics.race_details),
            selectinload(BorrowerDemographics.tribes),
        ),
    ),
    selectinload(LoanApplication.subject_property).options(
        selectinload(SubjectProperty.new_mortgages),
        selectinload(SubjectProperty.rental),
        selectinload(SubjectProperty.gifts),
    ),
)


async def list_applications(
    session: AsyncSession,
    user: UserContext,
    *,
    offset: int = 0,
    limit: int = 20,
) -> tuple[list[LoanApplication], int]:
    """Return the caller's applications, newest first, plus the total count."""
    count_stmt = select(func.count(LoanApplication.id)).where(
        LoanApplication.user_id == user.user_id
    )
    total = (await session.execute(count_stmt)).scalar() or 0

    stmt = (
        select(LoanApplication)
        .where(LoanApplication.user_id == user.user_id)
        .order_by(*_NEWEST_FIRST)
        .offset(offset)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all()), total


async def get_application(
    session: AsyncSession,
    user: UserContext,
    application_id: int,
) -> LoanApplication | None:
    """Load one application with its whole graph, or None if out of scope."""
    stmt = (
        select(LoanApplication)
        .where(
            LoanApplication.id == application_id,
            LoanApplication.user_id == user.user_id,
        )
        .options(*_GRAPH_OPTIONS)
    )
    result = await session.execute(stmt)
    app = result.scalar_one_or_none()
    if app is None:
        logger.debug("Application %s not found for user=%s", application_id, user.user_id)
    return app


async def get_latest_application(
    session: AsyncSession,
    user: UserContext,
) -> LoanApplication | None:
    stmt = (
        select(LoanApplication)
        .where(LoanApplication.user_id == user.user_id)
        .options(*_GRAPH_OPTIONS)
        .order_by(*_NEWEST_FIRST)
        .limit(1)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


def primary_borrower(app: LoanApplication) -> Borrower | None:
    for link in app.application_borrowers:
        if link.borrower_role == BorrowerRole.PRIMARY.value:
            return link.borrower
    return app.application_borrowers[0].borrower if app.application_borrowers else None


def _section_counts(borrower: Borrower) -> dict[str, int]:
    demographics = borrower.demographics
    return {
        "dependents": len(borrower.dependents),
        "addresses": len(borrower.addresses),
        "employments": len(borrower.employments),
        "income_breakdowns": sum(len(e.income_breakdowns) for e in borrower.employments),
        "other_incomes": len(borrower.other_incomes),
        "asset_accounts": len(borrower.asset_accounts),
        "asset_credit_others": len(borrower.asset_credit_others),
        "liabilities": len(borrower.liabilities),
        "other_liability_expenses": len(borrower.other_liability_expenses),
        "properties_owned": len(borrower.properties_owned),
        "property_mortgages": sum(1 for p in borrower.properties_owned if p.mortgage is not None),
        "declarations": int(borrower.declaration is not None),
        "military_service": int(borrower.military_service is not None),
        "demographics": int(demographics is not None),
        "ethnicity_selections": len(demographics.ethnicities) if demographics else 0,
        "race_selections": len(demographics.races) if demographics else 0,
    }


def build_summary(app: LoanApplication) -> ApplicationSummary:
    """Condense a fully loaded application graph into its response shape."""
    borrowers = [
        BorrowerSummary(
            id=link.borrower.id,
            role=link.borrower_role,
            first_name=link.borrower.first_name,
            last_name=link.borrower.last_name,
            ssn_last4=link.borrower.ssn_last4,
            dob=link.borrower.dob,
            email=link.borrower.email,
            sections=_section_counts(link.borrower),
        )
        for link in app.application_borrowers
        if link.borrower is not None
    ]

    subject = None
    if app.subject_property is not None:
        sp = app.subject_property
        subject = SubjectPropertySummary(
            id=sp.id,
            loan_amount=sp.loan_amount,
            loan_purpose=sp.loan_purpose,
            street=sp.street,
            city=sp.city,
            state=sp.state,
            zip=sp.zip,
            property_value=sp.property_value,
            occupancy_intent=sp.occupancy_intent,
            new_mortgages=len(sp.new_mortgages),
            has_rental_income=sp.rental is not None,
            gifts_or_grants=len(sp.gifts),
        )

    return ApplicationSummary(
        id=app.id,
        application_status=app.application_status,
        type_of_credit=app.type_of_credit,
        loan_purpose=app.loan_purpose,
        loan_term_months=app.loan_term_months,
        loan_type=app.loan_type,
        rate_lock=app.rate_lock,
        created_at=app.created_at,
        borrowers=borrowers,
        subject_property=subject,
    )
