# api/dependencies.py
"""
Service container
Wires the store, collaborators and agents for one dashboard session and
exposes them to the routers through request.app.state.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fastapi import HTTPException, Request

from ..agents.chat_concierge import ChatConcierge
from ..agents.event_orchestrator import EventOrchestrator
from ..agents.onboarding import ProfileService
from ..cache.recommendation_cache import RecommendationCache
from ..interfaces.geolocation import GeolocationProvider, IpGeolocationProvider
from ..interfaces.kv_store import PersistentKeyValueStore, create_store
from ..interfaces.profile_store import ProfileStore
from ..llm.collaborator import GenerativeTextCollaborator, create_collaborator
from ..schemas.event_schemas import UserProfile


@dataclass
class ServiceContainer:
    store: PersistentKeyValueStore
    profile_store: ProfileStore
    cache: RecommendationCache
    orchestrator: EventOrchestrator
    concierge: ChatConcierge
    profiles: ProfileService
    llm_provider: str
    store_backend: str


def build_container(
    store: Optional[PersistentKeyValueStore] = None,
    collaborator: Optional[GenerativeTextCollaborator] = None,
    geolocation: Optional[GeolocationProvider] = None,
    timeout: Optional[float] = None,
    clock: Callable[[], datetime] = datetime.now
) -> ServiceContainer:
    store = store if store is not None else create_store()
    collaborator = collaborator if collaborator is not None else create_collaborator()
    geolocation = geolocation if geolocation is not None else IpGeolocationProvider()

    profile_store = ProfileStore(store)
    cache = RecommendationCache(store)

    return ServiceContainer(
        store=store,
        profile_store=profile_store,
        cache=cache,
        orchestrator=EventOrchestrator(
            collaborator, cache, profile_store,
            geolocation=geolocation, timeout=timeout, clock=clock
        ),
        concierge=ChatConcierge(collaborator, timeout=timeout),
        profiles=ProfileService(profile_store, cache),
        llm_provider=type(collaborator).__name__,
        store_backend=type(store).__name__
    )


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def require_profile(request: Request) -> UserProfile:
    profile = get_container(request).profiles.get_profile()
    if profile is None or not profile.has_onboarded:
        raise HTTPException(status_code=409, detail="Complete onboarding first")
    return profile
