"""
Error taxonomy for the CitySense service.

Parse and storage errors never reach the end user; they are absorbed where
they occur and degrade to an empty result or a cache miss. Collaborator
errors surface as one generic message. Validation errors block the single
action that raised them.
"""

from typing import Optional


class CitySenseError(Exception):
    """Base class for all CitySense errors"""


class CollaboratorError(CitySenseError):
    """Network/API failure (or timeout) from an external collaborator"""


class GeolocationError(CollaboratorError):
    """Geolocation could not produce a position"""

    PERMISSION_DENIED = "permission_denied"
    UNAVAILABLE = "unavailable"

    def __init__(self, message: str, reason: str = UNAVAILABLE):
        super().__init__(message)
        self.reason = reason


class ParseError(CitySenseError):
    """Malformed generative-model response"""

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text


class StorageError(CitySenseError):
    """Quota exceeded or backend failure in the key-value store"""


class ValidationError(CitySenseError):
    """User input rejected before anything is persisted"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
