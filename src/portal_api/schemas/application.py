# This project was developed with assistance from AI tools.
"""Application save / read schemas."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from . import Pagination


class SaveApplicationResult(BaseModel):
    """Body returned by ``POST /saveLoanApplication``.

    Field names follow the browser client, which reads ``applicationId``.
    """

    success: bool
    applicationId: int | None = None
    error: str | None = None


class ApplicationListItem(BaseModel):
    """One saved application in the caller's history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    application_status: str
    loan_purpose: str | None = None
    loan_type: str | None = None
    created_at: datetime


class ApplicationListResponse(BaseModel):
    data: list[ApplicationListItem]
    pagination: Pagination


class BorrowerSummary(BaseModel):
    """Borrower identity plus a row count for each section they filled in."""

    id: int
    role: str
    first_name: str
    last_name: str
    ssn_last4: str | None = None
    dob: date | None = None
    email: str | None = None
    sections: dict[str, int] = Field(default_factory=dict)


class SubjectPropertySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    loan_amount: Decimal | None = None
    loan_purpose: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    property_value: Decimal | None = None
    occupancy_intent: str | None = None
    new_mortgages: int = 0
    has_rental_income: bool = False
    gifts_or_grants: int = 0


class ApplicationSummary(BaseModel):
    """The persisted graph for one save call, condensed."""

    id: int
    application_status: str
    type_of_credit: str | None = None
    loan_purpose: str | None = None
    loan_term_months: int | None = None
    loan_type: str | None = None
    rate_lock: str | None = None
    created_at: datetime
    borrowers: list[BorrowerSummary] = []
    subject_property: SubjectPropertySummary | None = None


class LegacyApplicationRecord(BaseModel):
    """Flat single-row shape older portal pages still read.

    Computed from the newest normalized application; never stored.
    """

    BorrowerFirstName: str | None = None
    BorrowerLastName: str | None = None
    BorrowerSSN: str | None = Field(default=None, description="Masked, e.g. ***-**-1234.")
    BorrowerDOB: date | None = None
    EmployerName: str | None = None
    AnnualIncome: Decimal | None = None
    CheckingAccounts: Decimal | None = None
    CreditCardDebt: Decimal | None = None
    PropertyAddress: str | None = None
    PropertyValue: Decimal | None = None
    LoanPurpose: str | None = None
    LoanTerm: int | None = None
    LoanType: str | None = None
    RateLock: str | None = None
    EmploymentType: str | None = None
    ApplicationStatus: str
