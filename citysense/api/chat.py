# api/chat.py
"""
Chat API Endpoint
Conversational interface for the CitySense concierge.
"""

from fastapi import APIRouter, Depends

from ..agents.chat_concierge import welcome_message
from ..schemas.event_schemas import ChatMessage, ChatRequest, UserProfile
from .dependencies import ServiceContainer, get_container, require_profile

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.get("/welcome", response_model=ChatMessage)
async def get_welcome(profile: UserProfile = Depends(require_profile)):
    return welcome_message(profile)


@router.post("", response_model=ChatMessage)
async def chat(
    request: ChatRequest,
    profile: UserProfile = Depends(require_profile),
    container: ServiceContainer = Depends(get_container)
):
    return await container.concierge.send(request.history, request.message, profile)
