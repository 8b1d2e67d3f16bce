# api/events.py
"""
User Events API Endpoints
User-created events and saved event ids.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..schemas.event_schemas import Event, NewEventForm, SavedToggleResponse
from .dependencies import ServiceContainer, get_container

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("/user", response_model=List[Event])
async def list_user_events(container: ServiceContainer = Depends(get_container)):
    return container.profiles.user_events()


@router.post("/user", response_model=Event, status_code=201)
async def create_user_event(form: NewEventForm, container: ServiceContainer = Depends(get_container)):
    return container.profiles.create_event(form)


@router.get("/saved")
async def list_saved(container: ServiceContainer = Depends(get_container)):
    return {"savedEvents": container.profiles.saved_event_ids()}


@router.post("/saved/{event_id}", response_model=SavedToggleResponse)
async def toggle_saved(event_id: str, container: ServiceContainer = Depends(get_container)):
    saved = container.profiles.toggle_saved(event_id)
    return SavedToggleResponse(event_id=event_id, saved=saved)
