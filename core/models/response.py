# =============================================================================
# core/models/response.py - Response Envelopes
# =============================================================================

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error envelope returned with every 4xx/5xx JSON response."""
    message: str = Field(..., examples=["User not found for id 65a4f0c2e1b2c3d4e5f60718"])
