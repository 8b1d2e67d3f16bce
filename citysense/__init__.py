# citysense/__init__.py
"""
CitySense Event Discovery Service

A local event discovery assistant with:
- Daily AI recommendations cached per city, interests and day
- Free-text event search
- User-created and saved events
- Conversational concierge (chat)
"""

__version__ = "1.0.0"

# Package structure:
# citysense/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application factory
# ├── config.py             <- Configuration settings
# ├── errors.py             <- Error taxonomy
# │
# ├── agents/               <- Orchestration
# │   ├── event_orchestrator.py  <- Daily load / search state machine
# │   ├── chat_concierge.py      <- Chat turns
# │   └── onboarding.py          <- Profile, user events, saved ids
# │
# ├── algorithms/
# │   └── filter_engine.py  <- Merge, category filter, top picks
# │
# ├── api/                  <- FastAPI Routers
# │
# ├── cache/
# │   ├── cache_keys.py     <- Scoped daily cache keys
# │   └── recommendation_cache.py
# │
# ├── interfaces/           <- Stores & external capabilities
# │   ├── kv_store.py       <- Memory / Redis key-value stores
# │   ├── profile_store.py  <- Persisted profile state
# │   └── geolocation.py    <- IP geolocation
# │
# ├── llm/
# │   ├── collaborator.py   <- OpenAI calls
# │   ├── normalizer.py     <- Model output -> Event records
# │   └── prompts.py        <- Prompt templates
# │
# └── schemas/
#     └── event_schemas.py  <- Pydantic models
