# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, lifespan (shared clients), error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Depends() providers for the shared clients
# - exceptions.py / responses.py: Error taxonomy and JSON envelopes
# - routers/: Home page, users resource, health checks
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
