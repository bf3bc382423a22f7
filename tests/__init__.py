# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the web starter:
# - test_models.py: Pydantic document/DTO validation
# - test_utils.py: ObjectId parsing and clock helpers
# - test_responses.py: JSON envelope helpers
# - test_config.py: Settings defaults and overrides
# - test_first_hit_service.py: Cache-aside first-hit lookup
# - test_user_service.py: User data access against an in-memory collection
# - test_users_api.py / test_home.py / test_health.py: HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
