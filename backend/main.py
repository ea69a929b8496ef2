"""FastAPI application entry point."""

import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from application.services import ViewService
from infrastructure.config import (
    ROOT_LOGGER,
    bind_request,
    get_logger,
    get_settings,
    reset_request,
    setup_logger,
)
from infrastructure.database import init_db, close_db
from infrastructure.database.repositories import SQLAlchemyViewRepository
from infrastructure.database.session import async_session_factory
from presentation.api.v1.endpoints import health
from presentation.api.v1.endpoints.management import (
    apis as management_apis,
    applications as management_applications,
    configuration,
    users,
)
from presentation.api.v1.endpoints.portal import (
    applications as portal_applications,
    subscriptions as portal_subscriptions,
)
from presentation.api.v1.errors import ERROR_RESPONSES, register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    
    # Setup logging
    setup_logger(
        name=ROOT_LOGGER,
        level=settings.log_level,
        log_format=settings.log_format,
    )
    logger = get_logger(__name__)
    
    # Initialize database
    logger.info(f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")
    await init_db()
    
    async with async_session_factory() as session:
        await ViewService(SQLAlchemyViewRepository(session)).create_default_view()
        await session.commit()
    
    yield
    
    # Shutdown
    await close_db()


# Create FastAPI app
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Bind the request to its log records and log its outcome."""
    token = bind_request(
        request.method,
        request.url.path,
        request.headers.get(settings.user_header),
    )
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        get_logger(__name__).info(f"{response.status_code} in {elapsed_ms:.1f} ms")
        return response
    finally:
        reset_request(token)


# Include routers
app.include_router(health.router)
app.include_router(portal_applications.router, prefix=settings.portal_prefix, responses=ERROR_RESPONSES)
app.include_router(portal_subscriptions.router, prefix=settings.portal_prefix, responses=ERROR_RESPONSES)
app.include_router(configuration.router, prefix=settings.management_prefix, responses=ERROR_RESPONSES)
app.include_router(users.router, prefix=settings.management_prefix, responses=ERROR_RESPONSES)
app.include_router(management_apis.router, prefix=settings.management_prefix, responses=ERROR_RESPONSES)
app.include_router(management_applications.router, prefix=settings.management_prefix, responses=ERROR_RESPONSES)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
