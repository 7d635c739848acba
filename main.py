import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import models  # noqa: F401  registers every table on Base.metadata
from app.core.config import Base, Settings, build_engine, build_session_factory, settings
from app.core.exceptions import register_exception_handlers
from app.api.routers import auth, records, report, journal, contracts, routines, wellness

logger = logging.getLogger(__name__)


# =====================================================================
# DATABASE INITIALIZATION
# =====================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=app.state.engine)
    yield
    app.state.engine.dispose()


# =====================================================================
# CREATE APP
# =====================================================================


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=app_settings.APP_NAME,
        debug=app_settings.DEBUG,
        description="Dopamine habit tracking & analysis API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Everything request-scoped (sessions, JWT keys) resolves from here.
    app.state.settings = app_settings
    app.state.engine = build_engine(app_settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # =================================================================
    # CORS MIDDLEWARE
    # =================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )
    logger.info("CORS allowed origins: %s", app_settings.CORS_ORIGINS)

    register_exception_handlers(app)

    # =================================================================
    # HEALTH CHECK
    # =================================================================

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # =================================================================
    # ROUTES
    # =================================================================

    app.include_router(auth.router)
    app.include_router(records.router)
    app.include_router(report.router)
    app.include_router(journal.router)
    app.include_router(contracts.router)
    app.include_router(routines.router)
    app.include_router(wellness.router)

    @app.get("/")
    def root():
        """API root endpoint."""
        return {
            "message": f"Welcome to {app_settings.APP_NAME}",
            "version": "1.0.0",
            "docs": "/docs",
            "endpoints": {
                "auth": "/auth",
                "records": "/records",
                "report": "/report",
                "journal": "/journal",
                "contracts": "/contracts",
                "routines": "/routines",
                "wellness": "/wellness",
            },
        }

    return app


app = create_app(settings)
