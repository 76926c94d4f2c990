# This project was developed with assistance from AI tools.
"""
Domain model structure tests
"""

from portal_db import Base


def test_loan_application_relationships():
    """LoanApplication should reach its borrowers and its subject property."""
    from portal_db import LoanApplication

    rel_names = {r.key for r in LoanApplication.__mapper__.relationships}
    assert {"application_borrowers", "subject_property"} <= rel_names


def test_borrower_relationships():
    from portal_db import Borrower

    rel_names = {r.key for r in Borrower.__mapper__.relationships}
    assert {
        "application_borrowers",
        "dependents",
        "addresses",
        "employments",
        "other_incomes",
        "asset_accounts",
        "asset_credit_others",
        "liabilities",
        "other_liability_expenses",
        "properties_owned",
        "declaration",
        "military_service",
        "demographics",
    } <= rel_names


def test_one_to_one_sections_are_scalar():
    from portal_db import Borrower, PropertyOwned, SubjectProperty

    assert Borrower.__mapper__.relationships["declaration"].uselist is False
    assert PropertyOwned.__mapper__.relationships["mortgage"].uselist is False
    assert SubjectProperty.__mapper__.relationships["rental"].uselist is False


def test_every_child_table_cascades_from_its_parent():
    """All foreign keys delete with their parent row."""
    for table in Base.metadata.sorted_tables:
        for fk in table.foreign_keys:
            assert fk.ondelete == "CASCADE", f"{table.name}.{fk.parent.name}"


def test_schema_has_all_tables():
    assert len(Base.metadata.tables) == 26
    assert "loan_applications" in Base.metadata.tables
    assert "american_indian_tribes" in Base.metadata.tables
