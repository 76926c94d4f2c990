# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .models import (
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

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Application root
    "LoanApplication",
    "ApplicationBorrower",
    # Borrower sections
    "Borrower",
    "BorrowerDependent",
    "BorrowerAddress",
    "BorrowerEmployment",
    "EmploymentIncomeBreakdown",
    "OtherIncome",
    "AssetAccount",
    "AssetCreditOther",
    "Liability",
    "OtherLiabilityExpense",
    "PropertyOwned",
    "PropertyMortgage",
    "BorrowerDeclaration",
    "BorrowerMilitaryService",
    "BorrowerDemographics",
    "EthnicitySelection",
    "EthnicityDetailSelection",
    "RaceSelection",
    "RaceDetailSelection",
    "AmericanIndianTribe",
    # Subject property
    "SubjectProperty",
    "SubjectNewMortgage",
    "SubjectPropertyRental",
    "GiftOrGrant",
]
