# This project was developed with assistance from AI tools.
"""Turn one flat application form into an ordered graph of ORM rows.

The builder only reads the submitted fields and decides which rows exist and
what goes in them. It never touches the database: parents are referenced by
``NodeRef`` (their position in the graph) and the writer swaps each ref for
the primary key of the row it already inserted.

Build order:

 1. LoanApplication (always)
 2. Borrower + ApplicationBorrower, when first and last name are present
 3. dependents
 4. current / former / mailing addresses
 5. current / additional / previous employment, each with income lines
 6. other income
 7. asset accounts
 8. other assets and credits
 9. liabilities
10. other liabilities and expenses
11. real estate owned, each with its mortgage
12. subject property with new mortgages, rental income, gifts and grants
13. declarations
14. military service
15. demographics with ethnicity / race selections

Steps 3-11 and 13-15 belong to the borrower and are skipped without one.
The subject property hangs off the application and is built independently.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from portal_db.database import Base
from portal_db.enums import (
    AddressType,
    AssetCreditCategory,
    AssetCreditType,
    BorrowerRole,
    EmploymentCategory,
    Ethnicity,
    EthnicityDetail,
    GiftDeposit,
    IncomeType,
    Race,
    RaceDetail,
    SectionStatus,
)
from portal_db.models import (
    AmericanIndianTribe,
    ApplicationBorrower,
    AssetAccount,
    AssetCreditOther,
    Borrower,
    BorrowerAddress,
    BorrowerDeclaration,
    BorrowerDemographics,
    BorrowerDependent,
    BorrowerEmployment,
    BorrowerMilitaryService,
    EmploymentIncomeBreakdown,
    EthnicityDetailSelection,
    EthnicitySelection,
    GiftOrGrant,
    Liability,
    LoanApplication,
    OtherIncome,
    OtherLiabilityExpense,
    PropertyMortgage,
    PropertyOwned,
    RaceDetailSelection,
    RaceSelection,
    SubjectNewMortgage,
    SubjectProperty,
    SubjectPropertyRental,
)

from . import codes, gates
from .codes import CodePolicy, CodeTable, normalize_key
from .normalize import (
    TriState,
    last4,
    parse_age_list,
    safe_date,
    to_decimal,
    to_int,
    to_null_if_empty,
    to_tri_state,
)

logger = logging.getLogger(__name__)

OTHER_INCOME_LINES = 4
ASSET_ACCOUNT_LINES = 5
ASSET_CREDIT_LINES = 4
LIABILITY_LINES = 5
OTHER_LIABILITY_LINES = 4
OWNED_PROPERTIES = 3
NEW_MORTGAGE_LINES = 2
GIFT_LINES = 2

_SELF_EMPLOYED = frozenset({"selfemployed", "businessowner", "1099", "owner"})


# ---------------------------------------------------------------------------
# Graph structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NodeRef:
    """Position of an earlier node in the same graph."""

    index: int


@dataclass
class EntityNode:
    model: type[Base]
    values: dict[str, Any]
    refs: dict[str, NodeRef] = field(default_factory=dict)

    def __repr__(self):
        return f"<EntityNode({self.model.__name__}, refs={sorted(self.refs)})>"


class EntityGraph:
    """Ordered list of rows to insert. Every ref points backwards."""

    def __init__(self):
        self.nodes: list[EntityNode] = []

    def add(self, model: type[Base], values: dict[str, Any], **refs: NodeRef) -> NodeRef:
        for column, ref in refs.items():
            if not 0 <= ref.index < len(self.nodes):
                raise ValueError(f"{model.__name__}.{column} refers to a node not yet in the graph")
        self.nodes.append(EntityNode(model=model, values=values, refs=refs))
        return NodeRef(len(self.nodes) - 1)

    def of_type(self, model: type[Base]) -> list[EntityNode]:
        return [node for node in self.nodes if node.model is model]

    def count(self, model: type[Base]) -> int:
        return len(self.of_type(model))

    def __iter__(self) -> Iterator[EntityNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class ApplicationGraphBuilder:
    """Builds the entity graph for one submission. Use once."""

    def __init__(self, form: Mapping[str, object], user_id: str, policy: CodePolicy = "fallback"):
        self.form = form
        self.user_id = user_id
        self.policy = policy
        self.graph = EntityGraph()

    # -- field readers --

    def text(self, name: str) -> str | None:
        return to_null_if_empty(self.form.get(name))

    def money(self, name: str) -> Decimal | None:
        return to_decimal(self.form.get(name))

    def integer(self, name: str) -> int | None:
        return to_int(self.form.get(name))

    def flag(self, name: str) -> TriState:
        return to_tri_state(self.form.get(name))

    def code(self, name: str, table: CodeTable) -> str | None:
        """Canonical code for a field that must hold one (fallback applies when blank)."""
        return codes.resolve(self.form.get(name), table, self.policy)

    def optional_code(self, name: str, table: CodeTable) -> str | None:
        """Canonical code, or None when the field was left blank."""
        return codes.resolve_optional(self.form.get(name), table, self.policy)

    # -- steps --

    def build(self) -> EntityGraph:
        application = self._application()
        borrower = self._borrower(application)
        if borrower is not None:
            self._dependents(borrower)
            self._addresses(borrower)
            self._employments(borrower)
            self._other_incomes(borrower)
            self._asset_accounts(borrower)
            self._asset_credits(borrower)
            self._liabilities(borrower)
            self._other_liabilities(borrower)
            self._properties_owned(borrower)
        self._subject_property(application)
        if borrower is not None:
            self._declaration(borrower)
            self._military_service(borrower)
            self._demographics(borrower)
        else:
            logger.debug("No borrower name submitted; borrower sections skipped")
        return self.graph

    def _application(self) -> NodeRef:
        return self.graph.add(
            LoanApplication,
            {
                "user_id": self.user_id,
                "type_of_credit": self.optional_code("typeOfCredit", codes.CREDIT_TYPE),
                "number_of_borrowers": self.integer("numberOfBorrowers"),
                "loan_purpose": codes.resolve_optional(
                    self.text("loanPurpose") or self.text("loanPurpose4"),
                    codes.LOAN_PURPOSE,
                    self.policy,
                ),
                "loan_term_months": _loan_term_months(self.integer("loanTerm")),
                "loan_type": self.text("loanType"),
                "rate_lock": self.text("rateLock"),
                "application_status": self.text("newStatus") or SectionStatus.NOT_STARTED.value,
                "employer_name": self.text("employerName"),
                "employment_type": self.text("employmentType"),
                "annual_income": self.money("annualIncome"),
                "checking_accounts": self.money("checkingAccounts"),
                "credit_card_debt": self.money("creditCardDebt"),
                "property_address": self.text("propertyAddress"),
                "property_value": self.money("propertyValue"),
                "loan_term": self.integer("loanTerm"),
            },
        )

    def _borrower(self, application: NodeRef) -> NodeRef | None:
        first_name = self.text("borrowerFirstName")
        last_name = self.text("borrowerLastName")
        if first_name is None or last_name is None:
            return None

        ages = parse_age_list(self.form.get("dependentsAges"))
        dependents_count = self.integer("dependentsNumber")
        if dependents_count is None and ages:
            dependents_count = len(ages)

        borrower = self.graph.add(
            Borrower,
            {
                "first_name": first_name,
                "middle_name": self.text("borrowerMiddleName"),
                "last_name": last_name,
                "suffix": self.text("borrowerSuffix"),
                "alternate_names": self.text("alternateNames"),
                "ssn_last4": last4(self.form.get("borrowerSSN")),
                "dob": safe_date(self.form.get("borrowerDOB")),
                "citizenship_status": self.optional_code("citizenship", codes.CITIZENSHIP),
                "marital_status": self.optional_code("maritalStatus", codes.MARITAL),
                "dependents_count": dependents_count,
                "home_phone": self.text("homePhone"),
                "cell_phone": self.text("cellPhone"),
                "work_phone": self.text("workPhone"),
                "email": self.text("emailAddress"),
            },
        )
        self.graph.add(
            ApplicationBorrower,
            {"borrower_role": BorrowerRole.PRIMARY.value},
            application_id=application,
            borrower_id=borrower,
        )
        return borrower

    def _dependents(self, borrower: NodeRef) -> None:
        for age in parse_age_list(self.form.get("dependentsAges")):
            self.graph.add(BorrowerDependent, {"age": age}, borrower_id=borrower)

    def _addresses(self, borrower: NodeRef) -> None:
        self._address(borrower, AddressType.CURRENT, "currentAddress")
        if gates.FORMER_ADDRESS.is_open(self.form):
            self._address(borrower, AddressType.FORMER, "formerAddress")
        if gates.MAILING_ADDRESS.is_open(self.form):
            self._address(borrower, AddressType.MAILING, "mailingAddress")

    def _address(self, borrower: NodeRef, address_type: AddressType, prefix: str) -> None:
        street = self.text(f"{prefix}Street")
        if street is None:
            return
        self.graph.add(
            BorrowerAddress,
            {
                "address_type": address_type.value,
                "street": street,
                "city": self.text(f"{prefix}City"),
                "state": self.text(f"{prefix}State"),
                "zip": self.text(f"{prefix}Zip"),
                "country": self.text(f"{prefix}Country"),
                "years_at_address": self.integer(f"{prefix}Years"),
                "months_at_address": self.integer(f"{prefix}Months"),
                "housing_type": self.optional_code(f"{prefix}Housing", codes.HOUSING),
                "monthly_rent": self.money(f"{prefix}Rent"),
            },
            borrower_id=borrower,
        )

    def _employments(self, borrower: NodeRef) -> None:
        if gates.CURRENT_EMPLOYMENT.is_open(self.form):
            self._employment(borrower, EmploymentCategory.CURRENT, "")
        if gates.ADDITIONAL_EMPLOYMENT.is_open(self.form):
            self._employment(borrower, EmploymentCategory.ADDITIONAL, "Additional1")
        if gates.PREVIOUS_EMPLOYMENT.is_open(self.form):
            self._previous_employment(borrower)

    def _employment(self, borrower: NodeRef, category: EmploymentCategory, suffix: str) -> None:
        employer_name = self.text(f"employerName{suffix}")
        if employer_name is None:
            return

        income_lines = [
            (IncomeType.BASE, self.money(f"baseIncome{suffix}")),
            (IncomeType.OVERTIME, self.money(f"overtimeIncome{suffix}")),
            (IncomeType.BONUS, self.money(f"bonusIncome{suffix}")),
            (IncomeType.COMMISSION, self.money(f"commissionIncome{suffix}")),
            (IncomeType.MILITARY_ENTITLEMENTS, self.money(f"militaryEntitlements{suffix}")),
            (IncomeType.OTHER, self.money(f"otherIncome{suffix}")),
        ]
        amounts = [amount for _, amount in income_lines if amount is not None]

        employment = self.graph.add(
            BorrowerEmployment,
            {
                "employment_category": category.value,
                "employer_name": employer_name,
                "employer_phone": self.text(f"employerPhone{suffix}"),
                "street": self.text(f"employerStreet{suffix}"),
                "unit": self.text(f"employerUnit{suffix}"),
                "city": self.text(f"employerCity{suffix}"),
                "state": self.text(f"employerState{suffix}"),
                "zip": self.text(f"employerZip{suffix}"),
                "country": self.text(f"employerCountry{suffix}"),
                "position_title": self.text(f"positionTitle{suffix}"),
                "start_date": safe_date(self.form.get(f"startDate{suffix}")),
                "end_date": None,
                "line_of_work_years": self.integer(f"lineOfWorkYears{suffix}"),
                "line_of_work_months": self.integer(f"lineOfWorkMonths{suffix}"),
                "is_family_employee": self.flag(f"isFamilyEmployee{suffix}").as_bool(),
                "business_owner_or_self_employed": (
                    _is_self_employed(self.form.get("employmentType"))
                    if category is EmploymentCategory.CURRENT
                    else None
                ),
                "ownership_share": self.optional_code(
                    f"ownershipShare{suffix}", codes.OWNERSHIP_SHARE
                ),
                "monthly_income_or_loss": self.money(f"monthlyIncomeOrLoss{suffix}"),
                "gross_monthly_income": sum(amounts, Decimal("0.00")) if amounts else None,
            },
            borrower_id=borrower,
        )
        for income_type, amount in income_lines:
            if amount is None:
                continue
            self.graph.add(
                EmploymentIncomeBreakdown,
                {"income_type": income_type.value, "monthly_amount": amount},
                employment_id=employment,
            )

    def _previous_employment(self, borrower: NodeRef) -> None:
        suffix = "Additional2"
        employer_name = self.text(f"employerName{suffix}")
        if employer_name is None:
            return
        self.graph.add(
            BorrowerEmployment,
            {
                "employment_category": EmploymentCategory.PREVIOUS.value,
                "employer_name": employer_name,
                "street": self.text(f"employerStreet{suffix}"),
                "unit": self.text(f"employerUnit{suffix}"),
                "city": self.text(f"employerCity{suffix}"),
                "state": self.text(f"employerState{suffix}"),
                "zip": self.text(f"employerZip{suffix}"),
                "country": self.text(f"employerCountry{suffix}"),
                "position_title": self.text(f"positionTitle{suffix}"),
                "start_date": safe_date(self.form.get(f"startDate{suffix}")),
                "end_date": safe_date(self.form.get(f"endDate{suffix}")),
                "business_owner_or_self_employed": self.flag(
                    f"wasBusinessOwner{suffix}"
                ).as_bool(),
                "gross_monthly_income": self.money(f"prevGrossMonthlyIncome{suffix}"),
            },
            borrower_id=borrower,
        )

    def _other_incomes(self, borrower: NodeRef) -> None:
        if not gates.OTHER_INCOME.is_open(self.form):
            return
        for n in range(1, OTHER_INCOME_LINES + 1):
            source = self.text(f"incomeSource{n}")
            amount = self.money(f"monthlyIncome{n}")
            if source is None or amount is None:
                continue
            self.graph.add(
                OtherIncome,
                {
                    "income_source": codes.resolve(source, codes.OTHER_INCOME_SOURCE, self.policy),
                    "monthly_amount": amount,
                },
                borrower_id=borrower,
            )

    def _asset_accounts(self, borrower: NodeRef) -> None:
        for n in range(1, ASSET_ACCOUNT_LINES + 1):
            account_type = self.text(f"accountType{n}")
            cash_value = self.money(f"cashValue{n}")
            if account_type is None or cash_value is None:
                continue
            self.graph.add(
                AssetAccount,
                {
                    "account_type": codes.resolve(
                        account_type, codes.ASSET_ACCOUNT_TYPE, self.policy
                    ),
                    "financial_institution": self.text(f"financialInstitution{n}"),
                    "account_number_last4": last4(self.form.get(f"accountNumber{n}")),
                    "cash_value": cash_value,
                },
                borrower_id=borrower,
            )

    def _asset_credits(self, borrower: NodeRef) -> None:
        if not gates.OTHER_ASSETS.is_open(self.form):
            return
        credit_codes = {member.value for member in AssetCreditType.credits()}
        for n in range(1, ASSET_CREDIT_LINES + 1):
            raw_type = self.text(f"assetCreditType{n}")
            value = self.money(f"assetCreditValue{n}")
            if raw_type is None or value is None:
                continue
            asset_credit_type = codes.resolve(raw_type, codes.ASSET_CREDIT_TYPE, self.policy)
            category = (
                AssetCreditCategory.CREDIT
                if asset_credit_type in credit_codes
                else AssetCreditCategory.ASSET
            )
            self.graph.add(
                AssetCreditOther,
                {
                    "category": category.value,
                    "asset_credit_type": asset_credit_type,
                    "value": value,
                },
                borrower_id=borrower,
            )

    def _liabilities(self, borrower: NodeRef) -> None:
        if not gates.LIABILITIES.is_open(self.form):
            return
        for n in range(1, LIABILITY_LINES + 1):
            account_type = self.text(f"accountType2c{n}")
            unpaid_balance = self.money(f"unpaidBalance2c{n}")
            monthly_payment = self.money(f"monthlyPayment2c{n}")
            if account_type is None or unpaid_balance is None or monthly_payment is None:
                continue
            self.graph.add(
                Liability,
                {
                    "account_type": codes.resolve(
                        account_type, codes.LIABILITY_ACCOUNT_TYPE, self.policy
                    ),
                    "company_name": self.text(f"companyName2c{n}"),
                    "account_number_last4": last4(self.form.get(f"accountNumber2c{n}")),
                    "unpaid_balance": unpaid_balance,
                    "monthly_payment": monthly_payment,
                    "pay_off_at_closing": self.flag(f"payOff2c{n}").or_false(),
                },
                borrower_id=borrower,
            )

    def _other_liabilities(self, borrower: NodeRef) -> None:
        if not gates.OTHER_LIABILITIES.is_open(self.form):
            return
        for n in range(1, OTHER_LIABILITY_LINES + 1):
            liability_type = self.text(f"liabilityType2d{n}")
            monthly_payment = self.money(f"monthlyPayment2d{n}")
            if liability_type is None or monthly_payment is None:
                continue
            self.graph.add(
                OtherLiabilityExpense,
                {
                    "liability_type": codes.resolve(
                        liability_type, codes.OTHER_LIABILITY_TYPE, self.policy
                    ),
                    "monthly_payment": monthly_payment,
                },
                borrower_id=borrower,
            )

    def _properties_owned(self, borrower: NodeRef) -> None:
        if not gates.REAL_ESTATE.is_open(self.form):
            return
        for n in range(1, OWNED_PROPERTIES + 1):
            if n in gates.ADDITIONAL_PROPERTIES and not gates.ADDITIONAL_PROPERTIES[n].is_open(
                self.form
            ):
                continue
            self._property_owned(borrower, n)

    def _property_owned(self, borrower: NodeRef, n: int) -> None:
        street = self.text(f"propertyStreet{n}")
        value = self.money(f"propertyValue{n}")
        if street is None and value is None:
            return
        owned = self.graph.add(
            PropertyOwned,
            {
                "street": street,
                "city": self.text(f"propertyCity{n}"),
                "state": self.text(f"propertyState{n}"),
                "zip": self.text(f"propertyZip{n}"),
                "property_value": value,
                "status": self.optional_code(f"propertyStatus{n}", codes.PROPERTY_STATUS),
                "intended_occupancy": self.optional_code(
                    f"intendedOccupancy{n}", codes.OCCUPANCY
                ),
                "monthly_insurance_taxes_hoa": self.money(f"monthlyInsurance{n}"),
                "monthly_rental_income": self.money(f"monthlyRentalIncome{n}"),
            },
            borrower_id=borrower,
        )
        if not gates.PROPERTY_MORTGAGES[n].is_open(self.form):
            return
        creditor_name = self.text(f"creditorName{n}")
        if creditor_name is None:
            return
        self.graph.add(
            PropertyMortgage,
            {
                "creditor_name": creditor_name,
                "account_number_last4": last4(self.form.get(f"creditorAccount{n}")),
                "monthly_payment": self.money(f"mortgagePayment{n}"),
                "unpaid_balance": self.money(f"unpaidBalance{n}"),
                "pay_off_at_closing": self.flag(f"payOffMortgage{n}").or_false(),
                "mortgage_type": self.optional_code(f"mortgageType{n}", codes.MORTGAGE_TYPE),
            },
            property_owned_id=owned,
        )

    def _subject_property(self, application: NodeRef) -> None:
        loan_amount = self.money("loanAmount4")
        street = self.text("propertyStreet4")
        if loan_amount is None and street is None:
            logger.debug("No loan amount or subject address; subject property skipped")
            return

        subject = self.graph.add(
            SubjectProperty,
            {
                "loan_amount": loan_amount,
                "loan_purpose": self.optional_code("loanPurpose4", codes.LOAN_PURPOSE),
                "loan_purpose_other": self.text("loanPurposeOtherDesc4"),
                "street": street,
                "unit": self.text("propertyUnit4"),
                "city": self.text("propertyCity4"),
                "state": self.text("propertyState4"),
                "zip": self.text("propertyZip4"),
                "county": self.text("propertyCounty4"),
                "number_of_units": self.integer("numberOfUnits4"),
                "property_value": self.money("propertyValue4"),
                "occupancy_intent": self.optional_code("occupancy4", codes.OCCUPANCY),
                "fha_secondary_residence": self.flag("fhaSecondaryResidence4").as_bool(),
                "mixed_use": self.flag("mixedUse4").as_bool(),
                "manufactured_home": self.flag("manufacturedHome4").as_bool(),
            },
            application_id=application,
        )

        if gates.NEW_MORTGAGES.is_open(self.form):
            for n in range(1, NEW_MORTGAGE_LINES + 1):
                creditor_name = self.text(f"creditorName4b{n}")
                if creditor_name is None:
                    continue
                self.graph.add(
                    SubjectNewMortgage,
                    {
                        "creditor_name": creditor_name,
                        "lien_type": self.optional_code(f"lienType4b{n}", codes.LIEN_TYPE),
                        "monthly_payment": self.money(f"monthlyPayment4b{n}"),
                        "loan_amount": self.money(f"loanAmount4b{n}"),
                        "credit_limit": self.money(f"creditLimit4b{n}"),
                    },
                    subject_property_id=subject,
                )

        if gates.RENTAL_INCOME.is_open(self.form):
            expected = self.money("expectedRentalIncome4c")
            if expected is not None:
                self.graph.add(
                    SubjectPropertyRental,
                    {
                        "expected_monthly_rental_income": expected,
                        "expected_net_monthly_rental_income": self.money("netRentalIncome4c"),
                    },
                    subject_property_id=subject,
                )

        if gates.GIFTS_GRANTS.is_open(self.form):
            for n in range(1, GIFT_LINES + 1):
                asset_type = self.text(f"giftAssetType4d{n}")
                value = self.money(f"giftValue4d{n}")
                if asset_type is None or value is None:
                    continue
                deposit = self.optional_code(f"deposited4d{n}", codes.GIFT_DEPOSIT)
                self.graph.add(
                    GiftOrGrant,
                    {
                        "asset_type": codes.resolve(
                            asset_type, codes.GIFT_ASSET_TYPE, self.policy
                        ),
                        "deposited": (
                            None if deposit is None else deposit == GiftDeposit.DEPOSITED.value
                        ),
                        "source": self.optional_code(f"giftSource4d{n}", codes.GIFT_SOURCE),
                        "value": value,
                    },
                    subject_property_id=subject,
                )

    def _declaration(self, borrower: NodeRef) -> None:
        def yes(name: str) -> bool:
            return self.flag(name).or_false()

        chapters = [
            chapter
            for chapter in ("7", "11", "12", "13")
            if yes(f"bankruptcyChapter{chapter}_5b")
        ]
        self.graph.add(
            BorrowerDeclaration,
            {
                "occupy_as_primary_residence": yes("occupyAsPrimary5a"),
                "ownership_interest_past_three_years": yes("ownershipInterest5a"),
                "prior_property_type": self.optional_code(
                    "priorPropertyType5a", codes.PRIOR_PROPERTY_TYPE
                ),
                "prior_property_title": self.optional_code(
                    "priorPropertyTitle5a", codes.PRIOR_PROPERTY_TITLE
                ),
                "family_relationship_with_seller": yes("familyRelationshipSeller5a"),
                "borrowing_undisclosed_money": yes("borrowingUndisclosed5a"),
                "undisclosed_money_amount": self.money("undisclosedAmount5a"),
                "applying_other_mortgage": yes("applyingOtherMortgage5a"),
                "applying_new_credit": yes("applyingNewCredit5a"),
                "priority_lien": yes("priorityLien5a"),
                "co_signer_undisclosed_debt": yes("coSignerUndisclosed5b"),
                "outstanding_judgments": yes("outstandingJudgments5b"),
                "delinquent_federal_debt": yes("delinquentFederalDebt5b"),
                "party_to_lawsuit": yes("partyToLawsuit5b"),
                "conveyed_title_in_lieu": yes("conveyedTitle5b"),
                "pre_foreclosure_short_sale": yes("preForeclosureSale5b"),
                "foreclosure": yes("foreclosure5b"),
                "bankruptcy": yes("bankruptcy5b"),
                "bankruptcy_chapters": ",".join(chapters) or None,
            },
            borrower_id=borrower,
        )

    def _military_service(self, borrower: NodeRef) -> None:
        flags = {
            "has_served": self.flag("militaryService7"),
            "currently_active_duty": self.flag("activeDuty7"),
            "retired_discharged_separated": self.flag("retiredDischarged7"),
            "non_activated_reserve": self.flag("nonActivatedReserve7"),
            "surviving_spouse": self.flag("survivingSpouse7"),
        }
        if not any(state is TriState.TRUE for state in flags.values()):
            logger.debug("No military service answered yes; section skipped")
            return
        values: dict[str, Any] = {column: state.as_bool() for column, state in flags.items()}
        values["active_duty_expiration_date"] = safe_date(self.form.get("activeDutyExpiration7"))
        self.graph.add(BorrowerMilitaryService, values, borrower_id=borrower)

    def _demographics(self, borrower: NodeRef) -> None:
        ethnicities = self._checked(_ETHNICITY_BOXES, codes.ETHNICITY)
        ethnicity_details = self._checked(_ETHNICITY_DETAIL_BOXES, codes.ETHNICITY_DETAIL)
        races = self._checked(_RACE_BOXES, codes.RACE)
        race_details = self._checked(_RACE_DETAIL_BOXES, codes.RACE_DETAIL)
        sex = self.optional_code("sex8", codes.SEX)
        if sex is None and not (ethnicities or ethnicity_details or races or race_details):
            logger.debug("No demographic answers; section skipped")
            return

        demographics = self.graph.add(
            BorrowerDemographics,
            {
                "sex": sex,
                "ethnicity_other_text": self.text("ethnicityOtherHispanicText8"),
                "race_other_asian_text": self.text("raceOtherAsianText8"),
                "race_other_pacific_text": self.text("raceOtherPacificText8"),
            },
            borrower_id=borrower,
        )
        for code in ethnicities:
            self.graph.add(EthnicitySelection, {"ethnicity": code}, demographics_id=demographics)
        for code in ethnicity_details:
            self.graph.add(
                EthnicityDetailSelection, {"detail": code}, demographics_id=demographics
            )
        for code in races:
            self.graph.add(RaceSelection, {"race": code}, demographics_id=demographics)
        for code in race_details:
            self.graph.add(RaceDetailSelection, {"detail": code}, demographics_id=demographics)

        tribes = self.text("americanIndianTribe8")
        for tribe in (part.strip() for part in (tribes or "").split(",")):
            if tribe:
                self.graph.add(
                    AmericanIndianTribe, {"tribe_name": tribe}, demographics_id=demographics
                )

    def _checked(self, boxes: Mapping[str, str], table: CodeTable) -> list[str]:
        """Codes for the ticked checkboxes in one group.

        A box posts either a yes/no value (``"on"``, ``"true"``) or its own
        label. Yes means the box's code; a label is mapped through ``table``.
        """
        selected: list[str] = []
        for name, box_code in boxes.items():
            raw = self.form.get(name)
            state = to_tri_state(raw)
            if state is TriState.TRUE:
                code = box_code
            elif state is TriState.FALSE or to_null_if_empty(raw) is None:
                continue
            else:
                code = codes.resolve_optional(raw, table, self.policy)
            if code is not None and code not in selected:
                selected.append(code)
        return selected


_ETHNICITY_BOXES = {
    "ethnicityHispanic8": Ethnicity.HISPANIC_OR_LATINO.value,
    "ethnicityNotHispanic8": Ethnicity.NOT_HISPANIC_OR_LATINO.value,
    "ethnicityNotProvided8": Ethnicity.NOT_PROVIDED.value,
}
_ETHNICITY_DETAIL_BOXES = {
    "ethnicityMexican8": EthnicityDetail.MEXICAN.value,
    "ethnicityPuertoRican8": EthnicityDetail.PUERTO_RICAN.value,
    "ethnicityCuban8": EthnicityDetail.CUBAN.value,
    "ethnicityOtherHispanic8": EthnicityDetail.OTHER_HISPANIC_OR_LATINO.value,
}
_RACE_BOXES = {
    "raceAmericanIndian8": Race.AMERICAN_INDIAN_OR_ALASKA_NATIVE.value,
    "raceAsian8": Race.ASIAN.value,
    "raceBlack8": Race.BLACK_OR_AFRICAN_AMERICAN.value,
    "racePacificIslander8": Race.NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER.value,
    "raceWhite8": Race.WHITE.value,
    "raceNotProvided8": Race.NOT_PROVIDED.value,
}
_RACE_DETAIL_BOXES = {
    "raceAsianIndian8": RaceDetail.ASIAN_INDIAN.value,
    "raceChinese8": RaceDetail.CHINESE.value,
    "raceFilipino8": RaceDetail.FILIPINO.value,
    "raceJapanese8": RaceDetail.JAPANESE.value,
    "raceKorean8": RaceDetail.KOREAN.value,
    "raceVietnamese8": RaceDetail.VIETNAMESE.value,
    "raceOtherAsian8": RaceDetail.OTHER_ASIAN.value,
    "raceNativeHawaiian8": RaceDetail.NATIVE_HAWAIIAN.value,
    "raceGuamanian8": RaceDetail.GUAMANIAN_OR_CHAMORRO.value,
    "raceSamoan8": RaceDetail.SAMOAN.value,
    "raceOtherPacific8": RaceDetail.OTHER_PACIFIC_ISLANDER.value,
}


def _loan_term_months(term: int | None) -> int | None:
    """The term select posts years ("30"); older pages posted months ("360")."""
    if term is None or term <= 0:
        return None
    return term * 12 if term <= 50 else term


def _is_self_employed(raw) -> bool | None:
    key = normalize_key(raw)
    if key is None:
        return None
    return key in _SELF_EMPLOYED


def build_application_graph(
    form: Mapping[str, object], user_id: str, *, policy: CodePolicy = "fallback"
) -> EntityGraph:
    """Build the ordered entity graph for one submitted application form."""
    graph = ApplicationGraphBuilder(form, user_id, policy).build()
    logger.debug(
        "Built application graph for user=%s: %d rows",
        user_id,
        len(graph),
    )
    return graph
