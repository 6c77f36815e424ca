import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.core.exceptions import (
    AppError,
    app_error_handler,
    http_exception_handler,
    rate_limit_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from app.modules.actions import routes as actions_routes
from app.modules.analyzer import routes as analyzer_routes
from app.modules.auth import routes as auth_routes
from app.modules.history import routes as history_routes
from app.modules.notes import routes as notes_routes
from app.modules.notifications import routes as notifications_routes
from app.modules.scraper import routes as scraper_routes
from app.modules.transcripts import routes as transcripts_routes
from app.modules.users import routes as users_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(analyzer_routes.router, prefix="/api")
app.include_router(actions_routes.router, prefix="/api")
app.include_router(scraper_routes.router, prefix="/api")
app.include_router(transcripts_routes.router, prefix="/api")
app.include_router(notes_routes.router, prefix="/api")
app.include_router(history_routes.router, prefix="/api")
app.include_router(users_routes.router, prefix="/api")
app.include_router(auth_routes.router, prefix="/api")
app.include_router(notifications_routes.router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.groq_configured:
        logger.warning("GROQ_API_KEY is not set; AI endpoints will fail")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
@limiter.exempt
async def root():
    return {"message": "Welcome to linkmage-backend", "status": "healthy"}


@app.get("/api/health")
@limiter.exempt
async def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "groqConfigured": settings.groq_configured,
    }


@app.get("/api/test-env")
async def test_env():
    """Which secrets are present, without revealing them"""
    return {
        "groqKeyPresent": settings.groq_configured,
        "groqKeyLength": len(settings.groq_api_key or ""),
        "environment": settings.environment,
        "supabaseConfigured": bool(settings.supabase_url and settings.supabase_anon_key),
        "emailConfigured": bool(settings.emailjs_public_key and settings.emailjs_service_id),
    }


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe"""
    return {"status": "ready"}


def run():
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
