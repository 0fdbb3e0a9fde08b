"""
Pydantic schemas shared by every router.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class PingResponse(BaseModel):
    message: str
