"""
FastAPI application factory

Shared by main_asyncio.py and the tests: each call returns a fresh app
wired to whatever ServiceContainer is installed in api.dependencies.
OpenAPI docs are served at /docs and /redoc when enabled.
"""

from typing import Optional, Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware.error_handler import register_exception_handlers
from api.routes import code, patterns, session
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

API_PREFIX = "/api/v1"

# Local frontend dev servers (React / Vite)
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)

ROUTERS = (session.router, patterns.router, code.router)


def create_app(
    title: str = "LED Pattern Studio",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[Sequence[str]] = None,
) -> FastAPI:
    """
    Build the API app: CORS, error envelope, versioned routers, health check

    Args:
        title: API title shown in the docs
        version: API version
        docs_enabled: Serve /docs, /redoc and /openapi.json
        cors_origins: Allowed browser origins (default: local dev servers)
    """
    app = FastAPI(
        title=title,
        description="Preview LED strip patterns and export them as FastLED sketches",
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    origins = list(cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/api/health", tags=["System"], summary="Health check")
    async def health_check():
        return {"status": "healthy", "service": "led-pattern-studio-api", "version": version}

    log.debug(
        "FastAPI app created",
        title=title,
        routes=", ".join(f"{API_PREFIX}{r.prefix}" for r in ROUTERS),
        cors=len(origins),
    )
    return app
