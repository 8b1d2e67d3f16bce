# api/__init__.py
"""
API Endpoints Package

Contains all FastAPI routers for the CitySense service:
- profile: onboarding, profile, reset
- dashboard: daily load, search, display projection
- events: user-created events, saved ids
- chat: concierge conversation
"""

from typing import TYPE_CHECKING

# Lazy imports to avoid circular dependencies
if TYPE_CHECKING:
    from .profile import router as profile_router
    from .dashboard import router as dashboard_router
    from .events import router as events_router
    from .chat import router as chat_router

__all__ = [
    "profile_router",
    "dashboard_router",
    "events_router",
    "chat_router"
]
