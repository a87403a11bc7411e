"""
Multi Author Metabox

FastAPI application entry point: the host platform with its plugins.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from euclid_mam.api.admin import router as admin_router
from euclid_mam.api.middleware.request_id import RequestIdMiddleware
from euclid_mam.api.site import router as site_router
from euclid_mam.api.v1 import router as api_v1_router
from euclid_mam.config import get_settings
from euclid_mam.database import close_db, init_db
from euclid_mam.logging_config import configure_logging, get_logger
from euclid_mam.plugins import PluginManager
from euclid_mam.schemas.common import HealthResponse

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown tasks.
    """
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.project_name,
    description="""
    Multi Author Metabox

    Tag posts with contributor authors on the edit screen and show them,
    with avatar, name and author link, at the end of each single post.
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Hook registries are built once; requests only read them
app.state.plugins = PluginManager.default()

app.add_middleware(RequestIdMiddleware)


def _error_headers(request: Request) -> dict:
    req_id = getattr(request.state, "request_id", None)
    return {"X-Request-ID": req_id} if req_id else {}


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Return HTTP errors as JSON carrying the request id."""
    headers = {**(exc.headers or {}), **_error_headers(request)}
    content = {"detail": exc.detail}
    req_id = getattr(request.state, "request_id", None)
    if req_id and exc.status_code >= 500:
        content["request_id"] = req_id
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
):
    """Handle request validation errors."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({
            "field": field,
            "message": error["msg"],
            "type": error["type"],
        })
    content = {"detail": "Validation error", "errors": errors}
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        content["request_id"] = req_id
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=content,
        headers=_error_headers(request),
    )


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled exception: %s", exc)
    req_id = getattr(request.state, "request_id", None)
    if settings.debug:
        content = {
            "detail": str(exc),
            "type": type(exc).__name__,
            "request_id": req_id,
        }
    else:
        content = {"detail": "Internal server error", "request_id": req_id}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=_error_headers(request),
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(request: Request):
    """Check application health."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        database="connected",
        plugins=[p.slug for p in request.app.state.plugins.plugins],
    )


# Plugin assets, e.g. /plugins/euclid-mam/css/mam-style.css
for plugin in app.state.plugins.plugins:
    if plugin.assets_dir is not None:
        app.mount(
            f"/plugins/{plugin.slug}",
            StaticFiles(directory=str(plugin.assets_dir)),
            name=f"plugin-{plugin.slug}",
        )

app.include_router(api_v1_router, prefix=settings.api_v1_prefix)
app.include_router(admin_router, prefix="/admin")
app.include_router(site_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "euclid_mam.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
