# This project was developed with assistance from AI tools.
"""Flat legacy view of the newest saved application.

Older portal pages read one wide row per user (``BorrowerFirstName``,
``CreditCardDebt``, ...). That row is derived here from the normalized graph
on every read instead of being written separately. Summary values the form
posted directly win; the detailed sections fill in whatever was left blank.
"""

from decimal import Decimal

from portal_db import Borrower, BorrowerEmployment, LoanApplication
from portal_db.enums import AssetAccountType, EmploymentCategory, LiabilityAccountType

from ..schemas.application import LegacyApplicationRecord
from .application import primary_borrower

_MONTHS_PER_YEAR = 12


def mask_ssn(ssn_last4: str | None) -> str | None:
    if not ssn_last4:
        return None
    return f"***-**-{ssn_last4}"


def _current_employment(borrower: Borrower | None) -> BorrowerEmployment | None:
    if borrower is None:
        return None
    for employment in borrower.employments:
        if employment.employment_category == EmploymentCategory.CURRENT.value:
            return employment
    return None


def _first_set(*values):
    for value in values:
        if value is not None:
            return value
    return None


def _sum_or_none(amounts: list[Decimal]) -> Decimal | None:
    return sum(amounts, Decimal("0.00")) if amounts else None


def _employment_type(employment: BorrowerEmployment | None) -> str | None:
    if employment is None or employment.business_owner_or_self_employed is None:
        return None
    return "SelfEmployed" if employment.business_owner_or_self_employed else "Employed"


def _property_address(app: LoanApplication) -> str | None:
    sp = app.subject_property
    if sp is None:
        return None
    locality = " ".join(part for part in (sp.state, sp.zip) if part)
    parts = [part for part in (sp.street, sp.city, locality) if part]
    return ", ".join(parts) or None


def project_legacy_record(app: LoanApplication) -> LegacyApplicationRecord:
    """Build the legacy flat record from a fully loaded application graph."""
    borrower = primary_borrower(app)
    employment = _current_employment(borrower)

    checking = []
    credit_card_debt = []
    if borrower is not None:
        checking = [
            account.cash_value
            for account in borrower.asset_accounts
            if account.account_type == AssetAccountType.CHECKING.value
        ]
        credit_card_debt = [
            liability.unpaid_balance
            for liability in borrower.liabilities
            if liability.account_type == LiabilityAccountType.CREDIT_CARD.value
        ]

    derived_income = None
    if employment is not None and employment.gross_monthly_income is not None:
        derived_income = employment.gross_monthly_income * _MONTHS_PER_YEAR

    sp = app.subject_property
    return LegacyApplicationRecord(
        BorrowerFirstName=borrower.first_name if borrower else None,
        BorrowerLastName=borrower.last_name if borrower else None,
        BorrowerSSN=mask_ssn(borrower.ssn_last4) if borrower else None,
        BorrowerDOB=borrower.dob if borrower else None,
        EmployerName=_first_set(
            app.employer_name, employment.employer_name if employment else None
        ),
        AnnualIncome=_first_set(app.annual_income, derived_income),
        CheckingAccounts=_first_set(app.checking_accounts, _sum_or_none(checking)),
        CreditCardDebt=_first_set(app.credit_card_debt, _sum_or_none(credit_card_debt)),
        PropertyAddress=_first_set(app.property_address, _property_address(app)),
        PropertyValue=_first_set(app.property_value, sp.property_value if sp else None),
        LoanPurpose=app.loan_purpose or (sp.loan_purpose if sp else None),
        LoanTerm=app.loan_term,
        LoanType=app.loan_type,
        RateLock=app.rate_lock,
        EmploymentType=_first_set(app.employment_type, _employment_type(employment)),
        ApplicationStatus=app.application_status,
    )
