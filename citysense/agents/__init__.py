# agents/__init__.py
"""
Agents Package

Contains the dashboard-facing components:
- EventOrchestrator: daily load / search / city resolution state machine
- ChatConcierge: chat turns with the model
- ProfileService: onboarding, reset, user events, saved ids
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .event_orchestrator import EventOrchestrator, DAILY_LOAD_ERROR, SEARCH_ERROR
    from .chat_concierge import ChatConcierge, welcome_message, APOLOGY_TEXT
    from .onboarding import ProfileService, create_user_event

__all__ = [
    "EventOrchestrator",
    "DAILY_LOAD_ERROR",
    "SEARCH_ERROR",
    "ChatConcierge",
    "welcome_message",
    "APOLOGY_TEXT",
    "ProfileService",
    "create_user_event"
]
