# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .first_hit_service import FirstHitService
from .user_service import UserService

__all__ = [
    "FirstHitService",
    "UserService",
]
