"""
FastAPI application for the Civica API.

Provides JSON endpoints for bills, legislators, news, the AI assistant,
community polls, feedback, civic events, users and bookmarks.

Responsibility: Application factory, error translation and router wiring
"""

# Load .env BEFORE importing settings (critical for pydantic-settings)
from dotenv import load_dotenv
load_dotenv('.env', override=True)

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from civica.adapters import (
    GovTrackBillsAdapter,
    LegislatorDirectoryAdapter,
    NewsAPIAdapter,
    TownHallAdapter,
)
from civica.config import Settings, settings as default_settings
from civica.db.store import MemoryStore
from civica.errors import CivicaError
from civica.services import BillService, CivicaAssistant, NewsService, TranslationService

# Configure logging
logging.basicConfig(
    level=default_settings.app.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def seed_from_directories(
    store: MemoryStore,
    legislator_directory: LegislatorDirectoryAdapter,
    town_halls: TownHallAdapter
) -> None:
    """Load the legislator directory and event calendar into the store."""
    legislators = await legislator_directory.fetch()
    store.legislators.upsert_many(legislators.data)
    events = await town_halls.fetch()
    store.events.upsert_many(events.data)
    logger.info(f"Loaded {len(legislators.data)} legislators and {len(events.data)} events")


def create_app(
    store: Optional[MemoryStore] = None,
    settings: Optional[Settings] = None,
    govtrack: Optional[GovTrackBillsAdapter] = None,
    newsapi: Optional[NewsAPIAdapter] = None,
    assistant: Optional[CivicaAssistant] = None,
    legislator_directory: Optional[LegislatorDirectoryAdapter] = None,
    town_halls: Optional[TownHallAdapter] = None
) -> FastAPI:
    """
    Build the application.

    Anything not passed in is built from settings. Tests pass their own
    store and fake adapters to stay isolated and offline.

    Args:
        store: Storage engine; seeded per ``STORE_SEED_DATA`` when omitted
        settings: Configuration; the environment-loaded settings by default
        govtrack: Bill adapter
        newsapi: News adapter
        assistant: OpenAI-backed assistant
        legislator_directory: Directory loaded into the store at startup
        town_halls: Event calendar loaded into the store at startup

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    if store is None:
        store = MemoryStore.seeded() if settings.store.seed_data else MemoryStore()

    govtrack = govtrack or GovTrackBillsAdapter(
        base_url=settings.govtrack.base_url,
        max_retries=settings.govtrack.max_retries,
        timeout_seconds=settings.govtrack.timeout_seconds,
    )
    newsapi = newsapi or NewsAPIAdapter(
        api_key=settings.news.api_key,
        base_url=settings.news.base_url,
        max_retries=settings.news.max_retries,
        timeout_seconds=settings.news.timeout_seconds,
    )
    assistant = assistant or CivicaAssistant(
        api_key=settings.openai.api_key,
        model=settings.openai.model,
        base_url=settings.openai.base_url,
        timeout=settings.openai.timeout_seconds,
    )
    legislator_directory = legislator_directory or LegislatorDirectoryAdapter()
    town_halls = town_halls or TownHallAdapter()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app.app_name} API...")
        logger.info(f"Environment: {settings.app.environment.value}")
        logger.info(f"Debug mode: {settings.app.debug}")
        logger.info(f"News API configured: {settings.news.enabled}")
        logger.info(f"AI assistant configured: {assistant.enabled}")
        if settings.store.seed_data:
            await seed_from_directories(store, legislator_directory, town_halls)
        yield
        logger.info(f"Shutting down {settings.app.app_name} API...")
        await govtrack.close()
        await newsapi.close()
        await assistant.close()

    app = FastAPI(
        title=f"{settings.app.app_name} API",
        description="Bilingual civic engagement API: bills, news, representatives, polls and town halls",
        version=settings.app.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.store = store
    app.state.assistant = assistant
    app.state.bill_service = BillService(store, govtrack, assistant)
    app.state.news_service = NewsService(store, newsapi, settings.app.default_location)
    app.state.translation_service = TranslationService(assistant)

    logger.info(f"CORS Origins configured: {settings.app.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
        max_age=3600,  # Cache preflight for 1 hour
    )

    @app.exception_handler(CivicaError)
    async def civica_error_handler(request: Request, exc: CivicaError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/")
    async def root():
        """Root endpoint - API information."""
        return {
            "name": f"{settings.app.app_name} API",
            "version": settings.app.app_version,
            "status": "operational",
            "endpoints": {
                "bills": "/api/bills",
                "legislators": "/api/legislators",
                "news": "/api/news",
                "chat": "/api/chat",
                "translate": "/api/translate",
                "polls": "/api/polls",
                "feedback": "/api/feedback",
                "events": "/api/events",
                "users": "/api/users",
                "bookmarks": "/api/bookmarks",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "civica-api"
        }

    # Import and include routers
    from api.endpoints import bills, chat, events, feedback, legislators, news, polls, users

    app.include_router(bills.router, prefix="/api", tags=["bills"])
    app.include_router(legislators.router, prefix="/api", tags=["legislators"])
    app.include_router(news.router, prefix="/api", tags=["news"])
    app.include_router(chat.router, prefix="/api", tags=["assistant"])
    app.include_router(polls.router, prefix="/api", tags=["polls"])
    app.include_router(feedback.router, prefix="/api", tags=["feedback"])
    app.include_router(events.router, prefix="/api", tags=["events"])
    app.include_router(users.router, prefix="/api", tags=["users"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
