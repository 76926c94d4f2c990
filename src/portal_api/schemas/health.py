# This project was developed with assistance from AI tools.
"""Health check schema."""

from typing import Literal

from pydantic import BaseModel


class ComponentHealth(BaseModel):
    name: str
    status: Literal["healthy", "unhealthy"]
    message: str = ""
    version: str | None = None
