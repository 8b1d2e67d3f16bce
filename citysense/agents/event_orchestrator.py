# agents/event_orchestrator.py
"""
Event Orchestrator (dashboard-facing)
Owns the load lifecycle for one dashboard:

    Idle -> Loading -> {Ready, Failed}
    Ready/Failed -> Loading   (new search, city change, refresh)

Paths:
- resolve_city: geolocation -> model city lookup -> fallback default city
- load_daily: cache hit returns immediately; on a miss the model is asked,
  the output normalized, stale days evicted and the result cached
- search: never touches the cache

Each load takes a ticket; a response that arrives after a newer request was
issued is returned to its caller but does not replace the displayed state
(last issued request wins). Nothing is cancelled once issued.
"""

from datetime import datetime
from typing import Callable, List, Optional

from loguru import logger

from ..algorithms import filter_engine
from ..cache.cache_keys import make_cache_key
from ..cache.recommendation_cache import RecommendationCache
from ..config import settings
from ..errors import CollaboratorError
from ..interfaces.geolocation import GeolocationProvider
from ..interfaces.profile_store import ProfileStore
from ..llm.collaborator import GenerativeTextCollaborator, call_with_timeout
from ..llm.normalizer import NormalizationContext, RecordNormalizer
from ..llm.prompts import build_city_prompt, build_daily_prompt, build_search_prompt
from ..schemas.event_schemas import DashboardView, Event, LoadState, UserProfile

DAILY_LOAD_ERROR = "Failed to load events. Please try refreshing."
SEARCH_ERROR = "Search failed. Please try again."


class EventOrchestrator:
    """
    Coordinates cached daily recommendations, live search and user-created
    events for a single dashboard session.
    """

    def __init__(
        self,
        collaborator: GenerativeTextCollaborator,
        cache: RecommendationCache,
        profile_store: ProfileStore,
        geolocation: Optional[GeolocationProvider] = None,
        normalizer: Optional[RecordNormalizer] = None,
        default_city: Optional[str] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.collaborator = collaborator
        self.cache = cache
        self.profile_store = profile_store
        self.geolocation = geolocation
        self.normalizer = normalizer or RecordNormalizer()
        self.default_city = default_city or settings.DEFAULT_CITY
        self.timeout = timeout
        self.clock = clock

        self.state = LoadState.IDLE
        self.error: Optional[str] = None
        self.events: List[Event] = []
        self.city = ""
        self._city_resolved = False
        self._ticket = 0

    # ============================================
    # State machine
    # ============================================

    def _begin(self) -> int:
        self._ticket += 1
        self.state = LoadState.LOADING
        self.error = None
        return self._ticket

    def _is_current(self, ticket: int) -> bool:
        if ticket != self._ticket:
            logger.debug(f"Discarding stale response (ticket {ticket}, current {self._ticket})")
            return False
        return True

    def _ready(self, ticket: int, events: List[Event]) -> None:
        if self._is_current(ticket):
            self.events = events
            self.state = LoadState.READY

    def _fail(self, ticket: int, message: str) -> None:
        if self._is_current(ticket):
            self.error = message
            self.state = LoadState.FAILED

    def reset(self) -> None:
        """Forget session state (profile reset)"""
        self._ticket += 1
        self.state = LoadState.IDLE
        self.error = None
        self.events = []
        self.city = ""
        self._city_resolved = False

    # ============================================
    # City resolution
    # ============================================

    async def resolve_city(self, profile: UserProfile) -> str:
        """
        Determine the current city once per session.

        Uses the profile's city when set; otherwise geolocation plus a model
        lookup, falling back to the default city on any failure. The
        resolved city is written to ``profile`` and persisted.
        """
        if profile.current_city:
            self.city = profile.current_city
            self._city_resolved = True
            return self.city

        if self._city_resolved and self.city:
            return self.city

        try:
            city = await self._locate()
        except Exception as e:
            logger.warning(f"Geolocation failed or denied, using {self.default_city}: {e}")
            city = self.default_city

        self.city = city
        self._city_resolved = True

        if profile.current_city != city:
            profile.current_city = city
            self.profile_store.save_profile(profile)

        logger.info(f"Current city: {city}")
        return city

    async def _locate(self) -> str:
        if self.geolocation is None:
            raise CollaboratorError("Geolocation unsupported")

        lat, lng = await call_with_timeout(
            self.geolocation.get_current_position(),
            settings.GEOLOCATION_TIMEOUT_SECONDS if self.timeout is None else self.timeout
        )
        text = await call_with_timeout(
            self.collaborator.generate(build_city_prompt(lat, lng)),
            self.timeout
        )
        city = (text or "").strip()
        if not city:
            raise CollaboratorError("City lookup returned no text")
        return city

    # ============================================
    # Daily recommendations
    # ============================================

    async def load_daily(self, profile: UserProfile) -> List[Event]:
        """
        Return today's recommendations for the profile's city and interests.

        Cache hits make no model call. On a collaborator failure the state
        moves to Failed and an empty list is returned; it is not retried.
        """
        city = profile.current_city or await self.resolve_city(profile)
        ticket = self._begin()

        key = make_cache_key(city, profile.interests, self.clock())
        cached = self.cache.get(key)
        if cached is not None:
            self._ready(ticket, cached)
            return cached

        prompt = build_daily_prompt(city, profile.interests, profile.spotify_connected, profile.top_artists)
        try:
            raw = await call_with_timeout(
                self.collaborator.generate(prompt, enable_web_search=True),
                self.timeout
            )
        except Exception as e:
            logger.error(f"Error fetching recommendations: {e}")
            self._fail(ticket, DAILY_LOAD_ERROR)
            return []

        events = self.normalizer.normalize(raw, NormalizationContext(city=city, source_prefix="evt"))

        self.cache.evict_stale(key)
        self.cache.put(key, events)

        self._ready(ticket, events)
        return events

    # ============================================
    # Search
    # ============================================

    async def search(self, city: str, query: str) -> List[Event]:
        """
        Keyword search; always bypasses the cache.

        An empty or unparseable answer is an empty Ready result. A
        collaborator failure also returns an empty list but moves the state
        to Failed with a retry message.
        """
        query = (query or "").strip()
        if not query:
            return []

        city = city or self.city or self.default_city
        ticket = self._begin()

        try:
            raw = await call_with_timeout(
                self.collaborator.generate(build_search_prompt(city, query), enable_web_search=True),
                self.timeout
            )
        except Exception as e:
            logger.error(f"Search error: {e}")
            self._fail(ticket, SEARCH_ERROR)
            return []

        events = self.normalizer.normalize(raw, NormalizationContext(city=city, source_prefix="search"))
        logger.info(f"Search '{query}' in {city}: {len(events)} results")

        self._ready(ticket, events)
        return events

    # ============================================
    # Display projection
    # ============================================

    def dashboard(self, category: str = filter_engine.ALL_CATEGORIES) -> DashboardView:
        all_events = filter_engine.merge(self.profile_store.load_user_events(), self.events)
        return DashboardView(
            state=self.state,
            error=self.error,
            city=self.city,
            category=category,
            events=all_events,
            filtered_events=filter_engine.filter_by_category(all_events, category),
            top_picks=filter_engine.top_picks(all_events),
            categories=filter_engine.available_categories(all_events),
            mappable_events=filter_engine.mappable(all_events)
        )
