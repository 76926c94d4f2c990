# This project was developed with assistance from AI tools.
"""
Mortgage portal -- normalized URLA application graph

One LoanApplication per save call, linked to its borrowers through
application_borrowers. Everything a borrower declares hangs off the
borrower row; the property being financed hangs off the application.
Code columns hold values from ``portal_db.enums``.
"""

from sqlalchemy import (
    Boolean,
    CHAR,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base

_MONEY = Numeric(14, 2)


def _created_at() -> Column:
    return Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


def _parent_fk(target: str) -> Column:
    return Column(
        Integer, ForeignKey(f"{target}.id", ondelete="CASCADE"), nullable=False, index=True,
    )


# ---------------------------------------------------------------------------
# Application root
# ---------------------------------------------------------------------------


class LoanApplication(Base):
    """Top-level application created by one save call."""

    __tablename__ = "loan_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), nullable=False, index=True)
    type_of_credit = Column(String(20), nullable=True)
    number_of_borrowers = Column(Integer, nullable=True)
    loan_purpose = Column(String(20), nullable=True)
    loan_term_months = Column(Integer, nullable=True)
    loan_type = Column(String(100), nullable=True)
    rate_lock = Column(String(50), nullable=True)
    application_status = Column(String(50), nullable=False, default="Not Started")
    # Flat summary fields posted by the older portal pages, stored as sent
    employer_name = Column(String(255), nullable=True)
    employment_type = Column(String(50), nullable=True)
    annual_income = Column(_MONEY, nullable=True)
    checking_accounts = Column(_MONEY, nullable=True)
    credit_card_debt = Column(_MONEY, nullable=True)
    property_address = Column(String(500), nullable=True)
    property_value = Column(_MONEY, nullable=True)
    loan_term = Column(Integer, nullable=True)
    created_at = _created_at()

    application_borrowers = relationship(
        "ApplicationBorrower", back_populates="application", cascade="all, delete-orphan",
    )
    subject_property = relationship(
        "SubjectProperty", back_populates="application", uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<LoanApplication(id={self.id}, status='{self.application_status}')>"


class ApplicationBorrower(Base):
    """Link between an application and one of its borrowers."""

    __tablename__ = "application_borrowers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = _parent_fk("loan_applications")
    borrower_id = _parent_fk("borrowers")
    borrower_role = Column(String(20), nullable=False)
    created_at = _created_at()

    application = relationship("LoanApplication", back_populates="application_borrowers")
    borrower = relationship("Borrower", back_populates="application_borrowers")

    def __repr__(self):
        return (
            f"<ApplicationBorrower(app_id={self.application_id}, "
            f"borrower_id={self.borrower_id}, role='{self.borrower_role}')>"
        )


# ---------------------------------------------------------------------------
# Borrower and the sections owned by the borrower
# ---------------------------------------------------------------------------


class Borrower(Base):
    """Borrower identity. Only the last four SSN digits are ever stored."""

    __tablename__ = "borrowers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=False)
    suffix = Column(String(20), nullable=True)
    alternate_names = Column(String(255), nullable=True)
    ssn_last4 = Column(CHAR(4), nullable=True)
    dob = Column(Date, nullable=True)
    citizenship_status = Column(String(40), nullable=True)
    marital_status = Column(String(20), nullable=True)
    dependents_count = Column(Integer, nullable=True)
    home_phone = Column(String(25), nullable=True)
    cell_phone = Column(String(25), nullable=True)
    work_phone = Column(String(25), nullable=True)
    email = Column(String(254), nullable=True)
    created_at = _created_at()

    application_borrowers = relationship("ApplicationBorrower", back_populates="borrower")
    dependents = relationship("BorrowerDependent", cascade="all, delete-orphan")
    addresses = relationship("BorrowerAddress", cascade="all, delete-orphan")
    employments = relationship("BorrowerEmployment", cascade="all, delete-orphan")
    other_incomes = relationship("OtherIncome", cascade="all, delete-orphan")
    asset_accounts = relationship("AssetAccount", cascade="all, delete-orphan")
    asset_credit_others = relationship("AssetCreditOther", cascade="all, delete-orphan")
    liabilities = relationship("Liability", cascade="all, delete-orphan")
    other_liability_expenses = relationship("OtherLiabilityExpense", cascade="all, delete-orphan")
    properties_owned = relationship("PropertyOwned", cascade="all, delete-orphan")
    declaration = relationship("BorrowerDeclaration", uselist=False, cascade="all, delete-orphan")
    military_service = relationship(
        "BorrowerMilitaryService", uselist=False, cascade="all, delete-orphan",
    )
    demographics = relationship("BorrowerDemographics", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Borrower(id={self.id}, name='{self.first_name} {self.last_name}')>"


class BorrowerDependent(Base):
    __tablename__ = "borrower_dependents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    age = Column(Integer, nullable=False)
    created_at = _created_at()


class BorrowerAddress(Base):
    """Current, former or mailing address of a borrower."""

    __tablename__ = "borrower_addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    address_type = Column(String(20), nullable=False)
    street = Column(String(255), nullable=False)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)
    country = Column(String(100), nullable=True)
    years_at_address = Column(Integer, nullable=True)
    months_at_address = Column(Integer, nullable=True)
    housing_type = Column(String(40), nullable=True)
    monthly_rent = Column(_MONEY, nullable=True)
    created_at = _created_at()

    def __repr__(self):
        return f"<BorrowerAddress(borrower_id={self.borrower_id}, type='{self.address_type}')>"


class BorrowerEmployment(Base):
    """Current, additional or previous employment of a borrower."""

    __tablename__ = "borrower_employments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    employment_category = Column(String(20), nullable=False)
    employer_name = Column(String(255), nullable=False)
    employer_phone = Column(String(25), nullable=True)
    street = Column(String(255), nullable=True)
    unit = Column(String(20), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)
    country = Column(String(100), nullable=True)
    position_title = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    line_of_work_years = Column(Integer, nullable=True)
    line_of_work_months = Column(Integer, nullable=True)
    is_family_employee = Column(Boolean, nullable=True)
    business_owner_or_self_employed = Column(Boolean, nullable=True)
    ownership_share = Column(String(20), nullable=True)
    monthly_income_or_loss = Column(_MONEY, nullable=True)
    gross_monthly_income = Column(_MONEY, nullable=True)
    created_at = _created_at()

    income_breakdowns = relationship("EmploymentIncomeBreakdown", cascade="all, delete-orphan")

    def __repr__(self):
        return (
            f"<BorrowerEmployment(id={self.id}, category='{self.employment_category}', "
            f"employer='{self.employer_name}')>"
        )


class EmploymentIncomeBreakdown(Base):
    """Gross monthly income line (base, overtime, ...) for one employment."""

    __tablename__ = "employment_income_breakdowns"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employment_id = _parent_fk("borrower_employments")
    income_type = Column(String(30), nullable=False)
    monthly_amount = Column(_MONEY, nullable=False)
    created_at = _created_at()


class OtherIncome(Base):
    __tablename__ = "other_incomes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    income_source = Column(String(40), nullable=False)
    monthly_amount = Column(_MONEY, nullable=False)
    created_at = _created_at()


class AssetAccount(Base):
    """Bank, retirement or other financial account (section 2a)."""

    __tablename__ = "asset_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    account_type = Column(String(40), nullable=False)
    financial_institution = Column(String(255), nullable=True)
    account_number_last4 = Column(String(4), nullable=True)
    cash_value = Column(_MONEY, nullable=False)
    created_at = _created_at()


class AssetCreditOther(Base):
    """Other asset or credit (section 2b)."""

    __tablename__ = "asset_credit_others"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    category = Column(String(10), nullable=False)
    asset_credit_type = Column(String(40), nullable=False)
    value = Column(_MONEY, nullable=False)
    created_at = _created_at()


class Liability(Base):
    """Credit card, installment, lease or other debt (section 2c)."""

    __tablename__ = "liabilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    account_type = Column(String(30), nullable=False)
    company_name = Column(String(255), nullable=True)
    account_number_last4 = Column(String(4), nullable=True)
    unpaid_balance = Column(_MONEY, nullable=False)
    monthly_payment = Column(_MONEY, nullable=False)
    pay_off_at_closing = Column(Boolean, nullable=False, default=False)
    created_at = _created_at()

    def __repr__(self):
        return f"<Liability(id={self.id}, type='{self.account_type}')>"


class OtherLiabilityExpense(Base):
    """Alimony, child support and similar obligations (section 2d)."""

    __tablename__ = "other_liability_expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    liability_type = Column(String(30), nullable=False)
    monthly_payment = Column(_MONEY, nullable=False)
    created_at = _created_at()


class PropertyOwned(Base):
    """Real estate the borrower already owns (section 3)."""

    __tablename__ = "properties_owned"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)
    property_value = Column(_MONEY, nullable=True)
    status = Column(String(20), nullable=True)
    intended_occupancy = Column(String(20), nullable=True)
    monthly_insurance_taxes_hoa = Column(_MONEY, nullable=True)
    monthly_rental_income = Column(_MONEY, nullable=True)
    created_at = _created_at()

    mortgage = relationship("PropertyMortgage", uselist=False, cascade="all, delete-orphan")


class PropertyMortgage(Base):
    __tablename__ = "property_mortgages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_owned_id = _parent_fk("properties_owned")
    creditor_name = Column(String(255), nullable=False)
    account_number_last4 = Column(String(4), nullable=True)
    monthly_payment = Column(_MONEY, nullable=True)
    unpaid_balance = Column(_MONEY, nullable=True)
    pay_off_at_closing = Column(Boolean, nullable=False, default=False)
    mortgage_type = Column(String(20), nullable=True)
    created_at = _created_at()


class BorrowerDeclaration(Base):
    """URLA section 5 answers. One row per borrower per application."""

    __tablename__ = "borrower_declarations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    # 5a -- about this property and your money for this loan
    occupy_as_primary_residence = Column(Boolean, nullable=False, default=False)
    ownership_interest_past_three_years = Column(Boolean, nullable=False, default=False)
    prior_property_type = Column(String(30), nullable=True)
    prior_property_title = Column(String(30), nullable=True)
    family_relationship_with_seller = Column(Boolean, nullable=False, default=False)
    borrowing_undisclosed_money = Column(Boolean, nullable=False, default=False)
    undisclosed_money_amount = Column(_MONEY, nullable=True)
    applying_other_mortgage = Column(Boolean, nullable=False, default=False)
    applying_new_credit = Column(Boolean, nullable=False, default=False)
    priority_lien = Column(Boolean, nullable=False, default=False)
    # 5b -- about your finances
    co_signer_undisclosed_debt = Column(Boolean, nullable=False, default=False)
    outstanding_judgments = Column(Boolean, nullable=False, default=False)
    delinquent_federal_debt = Column(Boolean, nullable=False, default=False)
    party_to_lawsuit = Column(Boolean, nullable=False, default=False)
    conveyed_title_in_lieu = Column(Boolean, nullable=False, default=False)
    pre_foreclosure_short_sale = Column(Boolean, nullable=False, default=False)
    foreclosure = Column(Boolean, nullable=False, default=False)
    bankruptcy = Column(Boolean, nullable=False, default=False)
    bankruptcy_chapters = Column(String(60), nullable=True)
    created_at = _created_at()


class BorrowerMilitaryService(Base):
    """URLA section 7."""

    __tablename__ = "borrower_military_services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    has_served = Column(Boolean, nullable=True)
    currently_active_duty = Column(Boolean, nullable=True)
    active_duty_expiration_date = Column(Date, nullable=True)
    retired_discharged_separated = Column(Boolean, nullable=True)
    non_activated_reserve = Column(Boolean, nullable=True)
    surviving_spouse = Column(Boolean, nullable=True)
    created_at = _created_at()


class BorrowerDemographics(Base):
    """URLA section 8. Multi-select answers live in the child tables."""

    __tablename__ = "borrower_demographics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = _parent_fk("borrowers")
    sex = Column(String(30), nullable=True)
    ethnicity_other_text = Column(String(100), nullable=True)
    race_other_asian_text = Column(String(100), nullable=True)
    race_other_pacific_text = Column(String(100), nullable=True)
    created_at = _created_at()

    ethnicities = relationship("EthnicitySelection", cascade="all, delete-orphan")
    ethnicity_details = relationship("EthnicityDetailSelection", cascade="all, delete-orphan")
    races = relationship("RaceSelection", cascade="all, delete-orphan")
    race_details = relationship("RaceDetailSelection", cascade="all, delete-orphan")
    tribes = relationship("AmericanIndianTribe", cascade="all, delete-orphan")


class EthnicitySelection(Base):
    __tablename__ = "ethnicity_selections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    demographics_id = _parent_fk("borrower_demographics")
    ethnicity = Column(String(30), nullable=False)
    created_at = _created_at()


class EthnicityDetailSelection(Base):
    __tablename__ = "ethnicity_detail_selections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    demographics_id = _parent_fk("borrower_demographics")
    detail = Column(String(30), nullable=False)
    created_at = _created_at()


class RaceSelection(Base):
    __tablename__ = "race_selections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    demographics_id = _parent_fk("borrower_demographics")
    race = Column(String(40), nullable=False)
    created_at = _created_at()


class RaceDetailSelection(Base):
    __tablename__ = "race_detail_selections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    demographics_id = _parent_fk("borrower_demographics")
    detail = Column(String(30), nullable=False)
    created_at = _created_at()


class AmericanIndianTribe(Base):
    __tablename__ = "american_indian_tribes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    demographics_id = _parent_fk("borrower_demographics")
    tribe_name = Column(Text, nullable=False)
    created_at = _created_at()


# ---------------------------------------------------------------------------
# Subject property (the property being financed)
# ---------------------------------------------------------------------------


class SubjectProperty(Base):
    """URLA section 4 -- loan and property information."""

    __tablename__ = "subject_properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    application_id = _parent_fk("loan_applications")
    loan_amount = Column(_MONEY, nullable=True)
    loan_purpose = Column(String(20), nullable=True)
    loan_purpose_other = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)
    unit = Column(String(20), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)
    county = Column(String(100), nullable=True)
    number_of_units = Column(Integer, nullable=True)
    property_value = Column(_MONEY, nullable=True)
    occupancy_intent = Column(String(20), nullable=True)
    fha_secondary_residence = Column(Boolean, nullable=True)
    mixed_use = Column(Boolean, nullable=True)
    manufactured_home = Column(Boolean, nullable=True)
    created_at = _created_at()

    application = relationship("LoanApplication", back_populates="subject_property")
    new_mortgages = relationship("SubjectNewMortgage", cascade="all, delete-orphan")
    rental = relationship("SubjectPropertyRental", uselist=False, cascade="all, delete-orphan")
    gifts = relationship("GiftOrGrant", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<SubjectProperty(id={self.id}, app_id={self.application_id})>"


class SubjectNewMortgage(Base):
    """Other new lien being placed on the subject property (4b)."""

    __tablename__ = "subject_new_mortgages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject_property_id = _parent_fk("subject_properties")
    creditor_name = Column(String(255), nullable=False)
    lien_type = Column(String(20), nullable=True)
    monthly_payment = Column(_MONEY, nullable=True)
    loan_amount = Column(_MONEY, nullable=True)
    credit_limit = Column(_MONEY, nullable=True)
    created_at = _created_at()


class SubjectPropertyRental(Base):
    """Expected rental income on the subject property (4c)."""

    __tablename__ = "subject_property_rentals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject_property_id = _parent_fk("subject_properties")
    expected_monthly_rental_income = Column(_MONEY, nullable=False)
    expected_net_monthly_rental_income = Column(_MONEY, nullable=True)
    created_at = _created_at()


class GiftOrGrant(Base):
    """Gift or grant applied to the transaction (4d)."""

    __tablename__ = "gifts_or_grants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject_property_id = _parent_fk("subject_properties")
    asset_type = Column(String(20), nullable=False)
    deposited = Column(Boolean, nullable=True)
    source = Column(String(30), nullable=True)
    value = Column(_MONEY, nullable=False)
    created_at = _created_at()
