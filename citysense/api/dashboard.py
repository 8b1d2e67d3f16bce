# api/dashboard.py
"""
Dashboard API Endpoints
Daily load, keyword search and the filtered display projection.
"""

from fastapi import APIRouter, Depends, Query

from ..schemas.event_schemas import DashboardView, SearchRequest, UserProfile
from .dependencies import ServiceContainer, get_container, require_profile

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardView)
async def get_dashboard(
    category: str = Query("All"),
    container: ServiceContainer = Depends(get_container)
):
    return container.orchestrator.dashboard(category)


@router.post("/load", response_model=DashboardView)
async def load_dashboard(
    profile: UserProfile = Depends(require_profile),
    container: ServiceContainer = Depends(get_container)
):
    """Resolve the city (first load only) and fetch today's recommendations"""
    await container.orchestrator.resolve_city(profile)
    await container.orchestrator.load_daily(profile)
    return container.orchestrator.dashboard()


@router.post("/search", response_model=DashboardView)
async def search_events(
    request: SearchRequest,
    profile: UserProfile = Depends(require_profile),
    container: ServiceContainer = Depends(get_container)
):
    await container.orchestrator.search(profile.current_city, request.query)
    return container.orchestrator.dashboard()
