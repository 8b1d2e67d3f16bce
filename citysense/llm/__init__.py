# llm/__init__.py
"""
LLM Components Package

Contains LLM-facing components:
- collaborator: opaque generative text calls (OpenAI)
- normalizer: repair of model output into Event records
- prompts: prompt templates
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .collaborator import (
        GenerativeTextCollaborator, OpenAICollaborator, ChatReply,
        call_with_timeout, create_collaborator
    )
    from .normalizer import RecordNormalizer, NormalizationContext

__all__ = [
    "GenerativeTextCollaborator",
    "OpenAICollaborator",
    "ChatReply",
    "call_with_timeout",
    "create_collaborator",
    "RecordNormalizer",
    "NormalizationContext"
]
