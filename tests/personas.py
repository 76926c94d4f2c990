# This project was developed with assistance from AI tools.
"""Persona factories for route tests. Fixed user IDs keep tests consistent."""

from portal_api.schemas.auth import UserContext
from portal_db.enums import UserRole

JANE_USER_ID = "jane-doe-001"
JOHN_USER_ID = "john-smith-002"
LO_USER_ID = "maria-lopez-lo"


def borrower_jane() -> UserContext:
    return UserContext(
        user_id=JANE_USER_ID,
        role=UserRole.BORROWER,
        email="jane@example.com",
        name="Jane Doe",
    )


def borrower_john() -> UserContext:
    return UserContext(
        user_id=JOHN_USER_ID,
        role=UserRole.BORROWER,
        email="john@example.com",
        name="John Smith",
    )


def loan_officer() -> UserContext:
    return UserContext(
        user_id=LO_USER_ID,
        role=UserRole.LOAN_OFFICER,
        email="maria@mortgage-portal.local",
        name="Maria Lopez",
    )
