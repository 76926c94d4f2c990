# This project was developed with assistance from AI tools.
"""Authentication schemas."""

from portal_db.enums import UserRole
from pydantic import BaseModel, ConfigDict


class UserContext(BaseModel):
    """Injected by auth middleware into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    email: str = ""
    name: str = ""


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str
    role: str = UserRole.BORROWER.value
    email: str = ""
    name: str = ""
