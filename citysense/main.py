"""
CitySense Service - FastAPI Application
LLM Provider:
- If OPENAI_API_KEY is set: use OpenAI
- Otherwise model calls fail and the dashboard reports a retry message
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from .api.chat import router as chat_router
from .api.dashboard import router as dashboard_router
from .api.dependencies import ServiceContainer, build_container
from .api.events import router as events_router
from .api.profile import router as profile_router
from .config import settings
from .errors import StorageError, ValidationError
from .schemas.event_schemas import HealthResponse


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    app = FastAPI(
        title="CitySense Service",
        description="Local event discovery: daily recommendations, search, user events and concierge chat",
        version="1.0.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.state.container = container or build_container()

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Validation failed on {request.url.path}: {exc}")
        return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"Storage failure on {request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.get("/health", response_model=HealthResponse)
    async def health():
        c = app.state.container
        return HealthResponse(status="healthy", llm_provider=c.llm_provider, store_backend=c.store_backend)

    app.include_router(profile_router)
    app.include_router(dashboard_router)
    app.include_router(events_router)
    app.include_router(chat_router)

    logger.info(f"CitySense service ready ({settings.API_ENV})")
    return app


def run():
    import uvicorn

    uvicorn.run("citysense.main:create_app", factory=True, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
