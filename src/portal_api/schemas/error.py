# This project was developed with assistance from AI tools.
"""RFC 7807 problem body returned for every non-2xx JSON response."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Problem Details (https://datatracker.ietf.org/doc/html/rfc7807)."""

    type: str = "about:blank"
    title: str = Field(description="Short summary, derived from the status code.")
    status: int
    detail: str = ""
    request_id: str = Field(default="", description="Echo of x-request-id, or a fresh UUID.")
