# =============================================================================
# core/models/home.py - Home Page View Model
# =============================================================================
# Data handed to the `home.html` template.
# =============================================================================

from pydantic import BaseModel, Field


class HomeData(BaseModel):
    """
    View model for the home page.

    Example:
        {
            "first_hit": "2024-01-15T10:30:00.123456+00:00",
            "title": "Python web starter",
            "message": "Hello from Redis"
        }
    """

    # ISO 8601 instant of the first request since the cache was empty
    first_hit: str = Field(..., description="ISO 8601 first-hit timestamp")

    title: str = Field(..., description="Page title")

    # Optional extra value read from the cache; omitted from the page when None
    message: str | None = Field(default=None, description="Cached home page message")
