"""TeamDesk — FastAPI Application Factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from teamdesk.auth.router import router as auth_router
from teamdesk.auth.session_store import FileSessionStore
from teamdesk.common.exceptions import register_exception_handlers
from teamdesk.common.rate_limit import limiter
from teamdesk.config import settings
from teamdesk.dashboard.router import admin_router as admin_dashboard_router
from teamdesk.dashboard.router import router as dashboard_router
from teamdesk.employees.router import departments_router, employees_router
from teamdesk.leave.router import admin_router as admin_leave_router
from teamdesk.leave.router import router as leave_router
from teamdesk.navigation.router import router as navigation_router
from teamdesk.store import DataStore, build_store
from teamdesk.tasks.router import router as tasks_router

logger = logging.getLogger("teamdesk")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    configure_logging()
    session = app.state.store.sessions.get()
    logger.info(
        "TeamDesk started (%s); session: %s",
        settings.ENVIRONMENT,
        session.user.email if session else "none",
    )
    yield
    logger.info("TeamDesk stopped")


def create_app(store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without an explicit *store* the bundled sample data is served and the
    session is persisted to ``settings.SESSION_FILE``.
    """
    app = FastAPI(
        title="TeamDesk",
        description="Employee task tracking and leave management dashboard API",
        version="1.0.0",
        docs_url="/api/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/api/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_store(
        FileSessionStore(settings.SESSION_FILE)
    )

    # Exception handlers (RFC 7807)
    register_exception_handlers(app)

    # Rate limiting (slowapi)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check (no auth)
    @app.get("/api/v1/health", tags=["system"])
    async def health_check():
        return {
            "status": "healthy",
            "version": "1.0.0",
            "environment": settings.ENVIRONMENT,
        }

    # Register routers
    app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
    app.include_router(navigation_router, prefix="/api/v1/navigation", tags=["navigation"])
    app.include_router(dashboard_router, prefix="/api/v1/dashboard", tags=["dashboard"])
    app.include_router(tasks_router, prefix="/api/v1/tasks", tags=["tasks"])
    app.include_router(leave_router, prefix="/api/v1/leave", tags=["leave"])
    app.include_router(admin_dashboard_router, prefix="/api/v1/admin/dashboard", tags=["admin"])
    app.include_router(employees_router, prefix="/api/v1/admin/employees", tags=["admin"])
    app.include_router(departments_router, prefix="/api/v1/admin/departments", tags=["admin"])
    app.include_router(admin_leave_router, prefix="/api/v1/admin/leave-requests", tags=["admin"])

    return app


app = create_app()
