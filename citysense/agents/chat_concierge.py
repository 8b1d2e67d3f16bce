# agents/chat_concierge.py
"""
Chat Concierge
One conversational turn with the model, grounded by web search.
Failures never break the conversation: they come back as an apologetic
model message.
"""

import time
from typing import List, Optional, Sequence

from loguru import logger

from ..errors import ValidationError
from ..llm.collaborator import GenerativeTextCollaborator, call_with_timeout
from ..llm.prompts import build_concierge_prompt
from ..schemas.event_schemas import ChatMessage, UserProfile

APOLOGY_TEXT = "I'm having trouble connecting to the city network right now. Please try again."


def _message_id(offset: int = 0) -> str:
    return str(int(time.time() * 1000) + offset)


def welcome_message(profile: UserProfile) -> ChatMessage:
    interests = ", ".join(profile.interests[:3])
    return ChatMessage(
        id="welcome",
        role="model",
        text=(
            f"Hi {profile.name}! I'm CitySense. I see you're interested in {interests}. "
            f"How can I help you plan your time in {profile.current_city}?"
        )
    )


def format_sources(sources) -> str:
    """Markdown source list, de-duplicated in first-seen order"""
    lines: List[str] = []
    for title, url in sources:
        line = f"- [{title}]({url})"
        if line not in lines:
            lines.append(line)
    if not lines:
        return ""
    return "\n\n**Sources:**\n" + "\n".join(lines)


class ChatConcierge:
    """Chat-facing agent"""

    def __init__(self, collaborator: GenerativeTextCollaborator, timeout: Optional[float] = None):
        self.collaborator = collaborator
        self.timeout = timeout

    async def send(
        self,
        history: Sequence[ChatMessage],
        message: str,
        profile: UserProfile
    ) -> ChatMessage:
        """
        Send ``message`` with the prior ``history`` and return the model's reply.

        Raises:
            ValidationError: blank message
        """
        if not message or not message.strip():
            raise ValidationError("Message must not be empty", field="message")

        system_instruction = build_concierge_prompt(
            profile.interests, profile.current_city, profile.spotify_connected, profile.top_artists
        )
        turns = [(m.role, m.text) for m in history if not m.is_thinking]

        try:
            reply = await call_with_timeout(
                self.collaborator.chat(system_instruction, turns, message.strip(), enable_web_search=True),
                self.timeout
            )
            text = (reply.text or "") + format_sources(reply.sources)
        except Exception as e:
            logger.error(f"Chat error: {e}")
            text = APOLOGY_TEXT

        return ChatMessage(id=_message_id(1), role="model", text=text)
