# This project was developed with assistance from AI tools.
"""
Closed code sets for the URLA application graph.

Shared domain types used by both SQLAlchemy models (portal_db) and the
canonicalization tables in portal_api. Enum values are the canonical codes
persisted in the database.
"""

import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    BORROWER = "borrower"
    LOAN_OFFICER = "loan_officer"


class SectionStatus(str, enum.Enum):
    """Per-section lifecycle label tracked by the portal workflow."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


# -- Structural codes (assigned by the graph builder, never user input) --


class BorrowerRole(str, enum.Enum):
    PRIMARY = "Primary"
    CO_BORROWER = "CoBorrower"


class AddressType(str, enum.Enum):
    CURRENT = "Current"
    FORMER = "Former"
    MAILING = "Mailing"


class EmploymentCategory(str, enum.Enum):
    CURRENT = "Current"
    ADDITIONAL = "Additional"
    PREVIOUS = "Previous"


class IncomeType(str, enum.Enum):
    BASE = "Base"
    OVERTIME = "Overtime"
    BONUS = "Bonus"
    COMMISSION = "Commission"
    MILITARY_ENTITLEMENTS = "MilitaryEntitlements"
    OTHER = "Other"


class AssetCreditCategory(str, enum.Enum):
    ASSET = "Asset"
    CREDIT = "Credit"


# -- Borrower identity --


class CreditType(str, enum.Enum):
    INDIVIDUAL = "Individual"
    JOINT = "Joint"


class CitizenshipStatus(str, enum.Enum):
    US_CITIZEN = "USCitizen"
    PERMANENT_RESIDENT_ALIEN = "PermanentResidentAlien"
    NON_PERMANENT_RESIDENT_ALIEN = "NonPermanentResidentAlien"


class MaritalStatus(str, enum.Enum):
    MARRIED = "Married"
    SEPARATED = "Separated"
    UNMARRIED = "Unmarried"


class HousingType(str, enum.Enum):
    OWN = "Own"
    RENT = "Rent"
    NO_PRIMARY_HOUSING_EXPENSE = "NoPrimaryHousingExpense"


class OwnershipShare(str, enum.Enum):
    LESS_THAN_25 = "LessThan25Percent"
    AT_LEAST_25 = "25PercentOrMore"


# -- Income, assets, liabilities --


class OtherIncomeSource(str, enum.Enum):
    ALIMONY = "Alimony"
    AUTOMOBILE_ALLOWANCE = "AutomobileAllowance"
    BOARDER_INCOME = "BoarderIncome"
    CAPITAL_GAINS = "CapitalGains"
    CHILD_SUPPORT = "ChildSupport"
    DISABILITY = "Disability"
    FOSTER_CARE = "FosterCare"
    HOUSING_OR_PARSONAGE = "HousingOrParsonage"
    INTEREST_AND_DIVIDENDS = "InterestAndDividends"
    MORTGAGE_CREDIT_CERTIFICATE = "MortgageCreditCertificate"
    MORTGAGE_DIFFERENTIAL = "MortgageDifferential"
    NOTES_RECEIVABLE = "NotesReceivable"
    PUBLIC_ASSISTANCE = "PublicAssistance"
    RETIREMENT = "Retirement"
    ROYALTIES = "Royalties"
    SEPARATE_MAINTENANCE = "SeparateMaintenance"
    SOCIAL_SECURITY = "SocialSecurity"
    TRUST = "Trust"
    UNEMPLOYMENT = "Unemployment"
    VA_BENEFITS = "VABenefitsNonEducational"
    OTHER = "Other"


class AssetAccountType(str, enum.Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"
    MONEY_MARKET = "MoneyMarket"
    CERTIFICATE_OF_DEPOSIT = "CertificateOfDeposit"
    MUTUAL_FUND = "MutualFund"
    STOCKS = "Stocks"
    STOCK_OPTIONS = "StockOptions"
    BONDS = "Bonds"
    RETIREMENT = "Retirement"
    BRIDGE_LOAN_PROCEEDS = "BridgeLoanProceeds"
    INDIVIDUAL_DEVELOPMENT_ACCOUNT = "IndividualDevelopmentAccount"
    TRUST_ACCOUNT = "TrustAccount"
    LIFE_INSURANCE_CASH_VALUE = "CashValueOfLifeInsurance"
    OTHER = "Other"


class AssetCreditType(str, enum.Enum):
    # Other assets
    PROCEEDS_REAL_ESTATE = "ProceedsFromRealEstateToBeSold"
    PROCEEDS_NON_REAL_ESTATE = "ProceedsFromSaleOfNonRealEstateAsset"
    SECURED_BORROWED_FUNDS = "SecuredBorrowedFunds"
    UNSECURED_BORROWED_FUNDS = "UnsecuredBorrowedFunds"
    # Credits
    EARNEST_MONEY = "EarnestMoney"
    EMPLOYER_ASSISTANCE = "EmployerAssistance"
    LOT_EQUITY = "LotEquity"
    RELOCATION_FUNDS = "RelocationFunds"
    RENT_CREDIT = "RentCredit"
    SWEAT_EQUITY = "SweatEquity"
    TRADE_EQUITY = "TradeEquity"
    OTHER = "Other"

    @classmethod
    def credits(cls) -> frozenset["AssetCreditType"]:
        return frozenset(
            {
                cls.EARNEST_MONEY,
                cls.EMPLOYER_ASSISTANCE,
                cls.LOT_EQUITY,
                cls.RELOCATION_FUNDS,
                cls.RENT_CREDIT,
                cls.SWEAT_EQUITY,
                cls.TRADE_EQUITY,
            }
        )


class LiabilityAccountType(str, enum.Enum):
    REVOLVING = "Revolving"
    INSTALLMENT = "Installment"
    OPEN_30_DAY = "Open30Day"
    LEASE = "Lease"
    CREDIT_CARD = "CreditCard"
    AUTO_LOAN = "AutoLoan"
    STUDENT_LOAN = "StudentLoan"
    OTHER = "Other"


class OtherLiabilityType(str, enum.Enum):
    ALIMONY = "Alimony"
    CHILD_SUPPORT = "ChildSupport"
    SEPARATE_MAINTENANCE = "SeparateMaintenance"
    JOB_RELATED_EXPENSES = "JobRelatedExpenses"
    OTHER = "Other"


# -- Real estate --


class OccupancyIntent(str, enum.Enum):
    PRIMARY_RESIDENCE = "PrimaryResidence"
    SECOND_HOME = "SecondHome"
    INVESTMENT = "Investment"
    OTHER = "Other"


class PropertyStatus(str, enum.Enum):
    SOLD = "Sold"
    PENDING_SALE = "PendingSale"
    RETAINED = "Retained"


class MortgageType(str, enum.Enum):
    CONVENTIONAL = "Conventional"
    FHA = "FHA"
    VA = "VA"
    USDA_RD = "USDARD"
    OTHER = "Other"


class LoanPurpose(str, enum.Enum):
    PURCHASE = "Purchase"
    REFINANCE = "Refinance"
    OTHER = "Other"


class LienType(str, enum.Enum):
    FIRST_LIEN = "FirstLien"
    SUBORDINATE_LIEN = "SubordinateLien"


class GiftAssetType(str, enum.Enum):
    CASH_GIFT = "CashGift"
    GIFT_OF_EQUITY = "GiftOfEquity"
    GRANT = "Grant"
    OTHER = "Other"


class GiftSource(str, enum.Enum):
    COMMUNITY_NONPROFIT = "CommunityNonprofit"
    EMPLOYER = "Employer"
    FEDERAL_AGENCY = "FederalAgency"
    LOCAL_AGENCY = "LocalAgency"
    RELATIVE = "Relative"
    RELIGIOUS_NONPROFIT = "ReligiousNonprofit"
    STATE_AGENCY = "StateAgency"
    UNMARRIED_PARTNER = "UnmarriedPartner"
    LENDER = "Lender"
    OTHER = "Other"


class GiftDeposit(str, enum.Enum):
    DEPOSITED = "Deposited"
    NOT_DEPOSITED = "NotDeposited"


# -- Declarations --


class PriorPropertyType(str, enum.Enum):
    PRIMARY_RESIDENCE = "PrimaryResidence"
    FHA_SECONDARY_RESIDENCE = "FHASecondaryResidence"
    SECOND_HOME = "SecondHome"
    INVESTMENT_PROPERTY = "InvestmentProperty"


class PriorPropertyTitle(str, enum.Enum):
    SOLE = "Sole"
    JOINT_WITH_SPOUSE = "JointWithSpouse"
    JOINT_WITH_OTHER = "JointWithOther"


# -- Demographics --


class Sex(str, enum.Enum):
    FEMALE = "Female"
    MALE = "Male"
    PREFER_NOT_TO_PROVIDE = "PreferNotToProvide"


class Ethnicity(str, enum.Enum):
    HISPANIC_OR_LATINO = "HispanicOrLatino"
    NOT_HISPANIC_OR_LATINO = "NotHispanicOrLatino"
    NOT_PROVIDED = "NotProvided"


class EthnicityDetail(str, enum.Enum):
    MEXICAN = "Mexican"
    PUERTO_RICAN = "PuertoRican"
    CUBAN = "Cuban"
    OTHER_HISPANIC_OR_LATINO = "OtherHispanicOrLatino"


class Race(str, enum.Enum):
    AMERICAN_INDIAN_OR_ALASKA_NATIVE = "AmericanIndianOrAlaskaNative"
    ASIAN = "Asian"
    BLACK_OR_AFRICAN_AMERICAN = "BlackOrAfricanAmerican"
    NATIVE_HAWAIIAN_OR_PACIFIC_ISLANDER = "NativeHawaiianOrOtherPacificIslander"
    WHITE = "White"
    NOT_PROVIDED = "NotProvided"


class RaceDetail(str, enum.Enum):
    ASIAN_INDIAN = "AsianIndian"
    CHINESE = "Chinese"
    FILIPINO = "Filipino"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    VIETNAMESE = "Vietnamese"
    OTHER_ASIAN = "OtherAsian"
    NATIVE_HAWAIIAN = "NativeHawaiian"
    GUAMANIAN_OR_CHAMORRO = "GuamanianOrChamorro"
    SAMOAN = "Samoan"
    OTHER_PACIFIC_ISLANDER = "OtherPacificIslander"
