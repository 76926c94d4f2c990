# This project was developed with assistance from AI tools.
"""Canonical code tables for enumerated form answers.

Radio buttons and free-text selects arrive in whatever spelling the page (or
an older copy of it) posted: ``"Primary Residence"``, ``"primary_residence"``,
``"PRIMARY"``. Each ``CodeTable`` maps those spellings onto one closed set of
codes from ``portal_db.enums`` and declares what to store when nothing
matches.

Tables with a safe catch-all fall back to ``"Other"``. Tables where a wrong
guess would misclassify the borrower (lien position, citizenship, ...) fall
back to ``None`` so the column reads as unspecified.
"""

import enum
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from portal_db.enums import (
    AssetAccountType,
    AssetCreditType,
    CitizenshipStatus,
    CreditType,
    Ethnicity,
    EthnicityDetail,
    GiftAssetType,
    GiftDeposit,
    GiftSource,
    HousingType,
    LiabilityAccountType,
    LienType,
    LoanPurpose,
    MaritalStatus,
    MortgageType,
    OccupancyIntent,
    OtherIncomeSource,
    OtherLiabilityType,
    OwnershipShare,
    PriorPropertyTitle,
    PriorPropertyType,
    PropertyStatus,
    Race,
    RaceDetail,
    Sex,
)

logger = logging.getLogger(__name__)

CodePolicy = Literal["fallback", "flag"]

OTHER = "Other"
UNRECOGNIZED = "Unrecognized"

_SEPARATORS = re.compile(r"[\s\-_./]+")


def normalize_key(raw) -> str | None:
    """Lookup key for a raw answer: trimmed, lowercased, separators removed."""
    if raw is None:
        return None
    text = raw if isinstance(raw, str) else str(raw)
    key = _SEPARATORS.sub("", text.strip().lower())
    return key or None


@dataclass(frozen=True)
class CodeTable:
    """Closed mapping of normalized spellings to canonical codes."""

    name: str
    mapping: Mapping[str, str]
    fallback: str | None

    def codes(self) -> frozenset[str]:
        return frozenset(self.mapping.values())


def _table(
    name: str,
    codes: type[enum.Enum],
    fallback: str | None,
    aliases: Mapping[str, enum.Enum] | None = None,
) -> CodeTable:
    """Build a table from an enum plus extra spellings.

    Every member is reachable by its value and by its Python name, so
    ``"PrimaryResidence"``, ``"primary residence"`` and ``"PRIMARY_RESIDENCE"``
    all resolve without listing them.
    """
    mapping: dict[str, str] = {}
    for member in codes:
        mapping[normalize_key(member.value)] = member.value
        mapping[normalize_key(member.name)] = member.value
    for spelling, member in (aliases or {}).items():
        mapping[normalize_key(spelling)] = member.value
    return CodeTable(name=name, mapping=mapping, fallback=fallback)


def map_enumerated(raw, table: CodeTable | Mapping[str, str], fallback: str | None) -> str | None:
    """Canonical code for ``raw``, or ``fallback`` when absent or unmapped."""
    mapping = table.mapping if isinstance(table, CodeTable) else table
    key = normalize_key(raw)
    if key is not None and key in mapping:
        return mapping[key]
    if key is not None:
        logger.debug(
            "Unmapped value %r for %s, using fallback %r",
            raw,
            getattr(table, "name", "code table"),
            fallback,
        )
    return fallback


def resolve(raw, table: CodeTable, policy: CodePolicy = "fallback") -> str | None:
    """Map ``raw`` through ``table`` using the table's own fallback.

    With ``policy="flag"`` an unmapped non-empty answer in a table whose
    fallback is ``"Other"`` is stored as ``"Unrecognized"`` instead, so bad
    input stays distinguishable from a borrower who picked "Other".
    """
    fallback = table.fallback
    if policy == "flag" and fallback == OTHER and normalize_key(raw) is not None:
        fallback = UNRECOGNIZED
    return map_enumerated(raw, table, fallback)


def resolve_optional(raw, table: CodeTable, policy: CodePolicy = "fallback") -> str | None:
    """Like ``resolve`` but an empty answer stays ``None`` instead of taking the fallback."""
    if normalize_key(raw) is None:
        return None
    return resolve(raw, table, policy)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

OCCUPANCY = _table(
    "occupancy",
    OccupancyIntent,
    OTHER,
    {
        "primary": OccupancyIntent.PRIMARY_RESIDENCE,
        "owner occupied": OccupancyIntent.PRIMARY_RESIDENCE,
        "principal residence": OccupancyIntent.PRIMARY_RESIDENCE,
        "pr": OccupancyIntent.PRIMARY_RESIDENCE,
        "second": OccupancyIntent.SECOND_HOME,
        "secondary": OccupancyIntent.SECOND_HOME,
        "vacation home": OccupancyIntent.SECOND_HOME,
        "sh": OccupancyIntent.SECOND_HOME,
        "investment property": OccupancyIntent.INVESTMENT,
        "investor": OccupancyIntent.INVESTMENT,
        "rental": OccupancyIntent.INVESTMENT,
        "ip": OccupancyIntent.INVESTMENT,
    },
)

SEX = _table(
    "sex",
    Sex,
    None,
    {
        "f": Sex.FEMALE,
        "m": Sex.MALE,
        "prefer not to say": Sex.PREFER_NOT_TO_PROVIDE,
        "i do not wish to provide this information": Sex.PREFER_NOT_TO_PROVIDE,
        "not provided": Sex.PREFER_NOT_TO_PROVIDE,
        "declined": Sex.PREFER_NOT_TO_PROVIDE,
    },
)

LOAN_PURPOSE = _table(
    "loan purpose",
    LoanPurpose,
    OTHER,
    {
        "buy": LoanPurpose.PURCHASE,
        "home purchase": LoanPurpose.PURCHASE,
        "refi": LoanPurpose.REFINANCE,
        "cash out refinance": LoanPurpose.REFINANCE,
        "rate and term refinance": LoanPurpose.REFINANCE,
    },
)

LIEN_TYPE = _table(
    "lien type",
    LienType,
    None,
    {
        "first": LienType.FIRST_LIEN,
        "1st": LienType.FIRST_LIEN,
        "1st lien": LienType.FIRST_LIEN,
        "subordinate": LienType.SUBORDINATE_LIEN,
        "second": LienType.SUBORDINATE_LIEN,
        "2nd": LienType.SUBORDINATE_LIEN,
        "second lien": LienType.SUBORDINATE_LIEN,
        "junior": LienType.SUBORDINATE_LIEN,
    },
)

PROPERTY_STATUS = _table(
    "property status",
    PropertyStatus,
    None,
    {
        "s": PropertyStatus.SOLD,
        "pending": PropertyStatus.PENDING_SALE,
        "ps": PropertyStatus.PENDING_SALE,
        "retain": PropertyStatus.RETAINED,
        "keep": PropertyStatus.RETAINED,
        "r": PropertyStatus.RETAINED,
    },
)

GIFT_ASSET_TYPE = _table(
    "gift asset type",
    GiftAssetType,
    OTHER,
    {
        "cash": GiftAssetType.CASH_GIFT,
        "gift": GiftAssetType.CASH_GIFT,
        "equity": GiftAssetType.GIFT_OF_EQUITY,
    },
)

GIFT_SOURCE = _table(
    "gift source",
    GiftSource,
    OTHER,
    {
        "nonprofit": GiftSource.COMMUNITY_NONPROFIT,
        "community non-profit": GiftSource.COMMUNITY_NONPROFIT,
        "religious non-profit": GiftSource.RELIGIOUS_NONPROFIT,
        "church": GiftSource.RELIGIOUS_NONPROFIT,
        "federal": GiftSource.FEDERAL_AGENCY,
        "state": GiftSource.STATE_AGENCY,
        "local": GiftSource.LOCAL_AGENCY,
        "family": GiftSource.RELATIVE,
        "family member": GiftSource.RELATIVE,
        "partner": GiftSource.UNMARRIED_PARTNER,
    },
)

GIFT_DEPOSIT = _table(
    "gift deposit",
    GiftDeposit,
    None,
    {
        "yes": GiftDeposit.DEPOSITED,
        "true": GiftDeposit.DEPOSITED,
        "y": GiftDeposit.DEPOSITED,
        "1": GiftDeposit.DEPOSITED,
        "no": GiftDeposit.NOT_DEPOSITED,
        "false": GiftDeposit.NOT_DEPOSITED,
        "n": GiftDeposit.NOT_DEPOSITED,
        "0": GiftDeposit.NOT_DEPOSITED,
        "not yet deposited": GiftDeposit.NOT_DEPOSITED,
    },
)

ASSET_CREDIT_TYPE = _table(
    "other asset or credit type",
    AssetCreditType,
    OTHER,
    {
        "proceeds from real estate": AssetCreditType.PROCEEDS_REAL_ESTATE,
        "proceeds from sale of non-real estate": AssetCreditType.PROCEEDS_NON_REAL_ESTATE,
        "secured borrowed": AssetCreditType.SECURED_BORROWED_FUNDS,
        "unsecured borrowed": AssetCreditType.UNSECURED_BORROWED_FUNDS,
        "earnest": AssetCreditType.EARNEST_MONEY,
        "earnest money deposit": AssetCreditType.EARNEST_MONEY,
        "employer assisted housing": AssetCreditType.EMPLOYER_ASSISTANCE,
        "relocation": AssetCreditType.RELOCATION_FUNDS,
    },
)

OTHER_INCOME_SOURCE = _table(
    "other income source",
    OtherIncomeSource,
    OTHER,
    {
        "auto allowance": OtherIncomeSource.AUTOMOBILE_ALLOWANCE,
        "boarder": OtherIncomeSource.BOARDER_INCOME,
        "dividends": OtherIncomeSource.INTEREST_AND_DIVIDENDS,
        "interest": OtherIncomeSource.INTEREST_AND_DIVIDENDS,
        "pension": OtherIncomeSource.RETIREMENT,
        "ssi": OtherIncomeSource.SOCIAL_SECURITY,
        "social security disability": OtherIncomeSource.SOCIAL_SECURITY,
        "va benefits": OtherIncomeSource.VA_BENEFITS,
        "va compensation": OtherIncomeSource.VA_BENEFITS,
    },
)

CITIZENSHIP = _table(
    "citizenship",
    CitizenshipStatus,
    None,
    {
        "citizen": CitizenshipStatus.US_CITIZEN,
        "u.s. citizen": CitizenshipStatus.US_CITIZEN,
        "permanent resident": CitizenshipStatus.PERMANENT_RESIDENT_ALIEN,
        "green card": CitizenshipStatus.PERMANENT_RESIDENT_ALIEN,
        "non-permanent resident": CitizenshipStatus.NON_PERMANENT_RESIDENT_ALIEN,
    },
)

HOUSING = _table(
    "housing",
    HousingType,
    None,
    {
        "owner": HousingType.OWN,
        "renter": HousingType.RENT,
        "no housing expense": HousingType.NO_PRIMARY_HOUSING_EXPENSE,
        "rent free": HousingType.NO_PRIMARY_HOUSING_EXPENSE,
        "living rent free": HousingType.NO_PRIMARY_HOUSING_EXPENSE,
    },
)

MARITAL = _table(
    "marital status",
    MaritalStatus,
    None,
    {
        "single": MaritalStatus.UNMARRIED,
        "divorced": MaritalStatus.UNMARRIED,
        "widowed": MaritalStatus.UNMARRIED,
    },
)

CREDIT_TYPE = _table(
    "type of credit",
    CreditType,
    None,
    {
        "individual credit": CreditType.INDIVIDUAL,
        "single": CreditType.INDIVIDUAL,
        "joint credit": CreditType.JOINT,
    },
)

ASSET_ACCOUNT_TYPE = _table(
    "asset account type",
    AssetAccountType,
    OTHER,
    {
        "cd": AssetAccountType.CERTIFICATE_OF_DEPOSIT,
        "stock": AssetAccountType.STOCKS,
        "bond": AssetAccountType.BONDS,
        "401k": AssetAccountType.RETIREMENT,
        "ira": AssetAccountType.RETIREMENT,
        "ida": AssetAccountType.INDIVIDUAL_DEVELOPMENT_ACCOUNT,
        "trust": AssetAccountType.TRUST_ACCOUNT,
        "life insurance": AssetAccountType.LIFE_INSURANCE_CASH_VALUE,
    },
)

LIABILITY_ACCOUNT_TYPE = _table(
    "liability account type",
    LiabilityAccountType,
    OTHER,
    {
        "open 30 days": LiabilityAccountType.OPEN_30_DAY,
        "credit card": LiabilityAccountType.CREDIT_CARD,
        "auto": LiabilityAccountType.AUTO_LOAN,
        "car loan": LiabilityAccountType.AUTO_LOAN,
        "student": LiabilityAccountType.STUDENT_LOAN,
    },
)

OTHER_LIABILITY_TYPE = _table(
    "other liability type",
    OtherLiabilityType,
    OTHER,
    {
        "job related": OtherLiabilityType.JOB_RELATED_EXPENSES,
        "maintenance": OtherLiabilityType.SEPARATE_MAINTENANCE,
    },
)

MORTGAGE_TYPE = _table(
    "mortgage type",
    MortgageType,
    OTHER,
    {
        "conv": MortgageType.CONVENTIONAL,
        "usda": MortgageType.USDA_RD,
        "usda rural development": MortgageType.USDA_RD,
    },
)

OWNERSHIP_SHARE = _table(
    "ownership share",
    OwnershipShare,
    None,
    {
        "less than 25%": OwnershipShare.LESS_THAN_25,
        "lessthan25": OwnershipShare.LESS_THAN_25,
        "<25%": OwnershipShare.LESS_THAN_25,
        "25% or more": OwnershipShare.AT_LEAST_25,
        "25ormore": OwnershipShare.AT_LEAST_25,
        ">=25%": OwnershipShare.AT_LEAST_25,
    },
)

PRIOR_PROPERTY_TYPE = _table(
    "prior property type",
    PriorPropertyType,
    None,
    {
        "pr": PriorPropertyType.PRIMARY_RESIDENCE,
        "sr": PriorPropertyType.FHA_SECONDARY_RESIDENCE,
        "sh": PriorPropertyType.SECOND_HOME,
        "ip": PriorPropertyType.INVESTMENT_PROPERTY,
        "investment": PriorPropertyType.INVESTMENT_PROPERTY,
    },
)

PRIOR_PROPERTY_TITLE = _table(
    "prior property title",
    PriorPropertyTitle,
    None,
    {
        "s": PriorPropertyTitle.SOLE,
        "by yourself": PriorPropertyTitle.SOLE,
        "sp": PriorPropertyTitle.JOINT_WITH_SPOUSE,
        "with spouse": PriorPropertyTitle.JOINT_WITH_SPOUSE,
        "o": PriorPropertyTitle.JOINT_WITH_OTHER,
        "with another person": PriorPropertyTitle.JOINT_WITH_OTHER,
    },
)

ETHNICITY = _table(
    "ethnicity",
    Ethnicity,
    None,
    {
        "hispanic": Ethnicity.HISPANIC_OR_LATINO,
        "latino": Ethnicity.HISPANIC_OR_LATINO,
        "not hispanic": Ethnicity.NOT_HISPANIC_OR_LATINO,
        "i do not wish to provide this information": Ethnicity.NOT_PROVIDED,
    },
)

ETHNICITY_DETAIL = _table(
    "ethnicity detail",
    EthnicityDetail,
    None,
    {"other hispanic": EthnicityDetail.OTHER_HISPANIC_OR_LATINO},
)

RACE = _table(
    "race",
    Race,
    None,
    {
        "american indian": Race.AMERICAN_INDIAN_OR_ALASKA_NATIVE,
        "black": Race.BLACK_OR_AFRICAN_AMERICAN,
        "african american": Race.BLACK_OR_AFRICAN_AMERICAN,
        "pacific islander": Race.NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER,
        "native hawaiian or other pacific islander": Race.NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER,
        "i do not wish to provide this information": Race.NOT_PROVIDED,
    },
)

RACE_DETAIL = _table(
    "race detail",
    RaceDetail,
    None,
    {
        "guamanian": RaceDetail.GUAMANIAN_OR_CHAMORRO,
        "chamorro": RaceDetail.GUAMANIAN_OR_CHAMORRO,
        "other pacific": RaceDetail.OTHER_PACIFIC_ISLANDER,
    },
)
