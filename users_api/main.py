"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (request context, body limit, CORS)
  - Mount the users router under the configured API prefix
  - Expose health check and metrics endpoints

Collaborators:
  - FastAPI: ASGI web framework
  - RequestContextMiddleware: Request ID and logging context
  - routes.router: User endpoints
  - infrastructure.db: Mongo client lifecycle

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - No authentication (out of scope)

Notes:
  - Middleware order matters: RequestContext -> BodyLimit -> CORS -> routes
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics
  - Run with: uvicorn users_api.main:app
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .container import get_user_repository
from .exception_handlers import register_exception_handlers
from .infrastructure.db import close_client, init_client
from .logger import logger
from .metrics import get_metrics_response
from .middleware import BodyLimitMiddleware, RequestContextMiddleware
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Opens and closes the Mongo client."""
    settings = get_settings()

    if settings.users_repository == "mongo":
        init_client(
            host=settings.mongo_addr,
            port=settings.mongo_port,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )

    logger.info(
        "Users API starting up",
        extra={
            "mongo_addr": settings.mongo_addr,
            "mongo_db_name": settings.mongo_db_name,
            "users_repository": settings.users_repository,
            "api_prefix": settings.api_prefix,
        },
    )
    yield

    if settings.users_repository == "mongo":
        close_client()
    get_user_repository.cache_clear()
    logger.info("Users API shutting down")


_settings = get_settings()

# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="Users API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "users",
            "description": "List, fetch, create and delete users",
        },
    ],
)

# R: Middleware order (last added = first to execute):
# 1. RequestContextMiddleware - sets request_id
# 2. BodyLimitMiddleware - rejects oversized bodies early
# 3. CORSMiddleware - handles preflight
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.get_allowed_origins_list(),
    allow_credentials=_settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
)
app.add_middleware(BodyLimitMiddleware)
app.add_middleware(RequestContextMiddleware)

app.include_router(router, prefix=_settings.api_prefix)

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    R: Health check that verifies the database is reachable.

    Returns:
        ok: True if the database answered a ping
        db: "connected" or "disconnected"
        request_id: Correlation ID for this request
    """
    db_status = "disconnected"
    try:
        if get_user_repository().ping():
            db_status = "connected"
    except Exception as e:
        logger.warning("Health check: DB unavailable", extra={"error": str(e)})

    return {
        "ok": db_status == "connected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/metrics")
def metrics():
    """
    R: Expose Prometheus metrics.

    Returns:
        Prometheus text format metrics
    """
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
