"""
Pydantic models for Adjust S2S API responses.
"""

from pydantic import BaseModel, field_validator


class TrackingResponse(BaseModel):
    """Response for a successfully tracked event."""
    status: str = ""
    tracker_token: str = ""
    tracker_name: str = ""
    network: str = ""
    country: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat JSON null as an empty string."""
        return "" if v is None else v
