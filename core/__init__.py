# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routers:
# - models/: Pydantic schemas for documents, DTOs and view models
# - services/: Cache-aside first-hit resolver and user data access
#
# Code in this package does not use FastAPI directly. Services raise the
# exceptions from app.exceptions, which the app turns into HTTP responses.
# =============================================================================
