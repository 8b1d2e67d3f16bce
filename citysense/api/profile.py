# api/profile.py
"""
Profile API Endpoints
Onboarding, profile lookup and reset.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..schemas.event_schemas import INTEREST_OPTIONS, OnboardingRequest, UserProfile
from .dependencies import ServiceContainer, get_container

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("", response_model=UserProfile)
async def get_profile(container: ServiceContainer = Depends(get_container)):
    profile = container.profiles.get_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="Not onboarded")
    return profile


@router.get("/interests")
async def list_interests():
    return {"interests": INTEREST_OPTIONS}


@router.post("/onboarding", response_model=UserProfile, status_code=201)
async def complete_onboarding(
    request: OnboardingRequest,
    container: ServiceContainer = Depends(get_container)
):
    return container.profiles.complete_onboarding(
        request.name, request.interests, request.spotify_connected
    )


@router.post("/reset", status_code=204)
async def reset_profile(container: ServiceContainer = Depends(get_container)):
    container.profiles.reset()
    container.orchestrator.reset()
