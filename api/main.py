"""FastAPI application for the MyBirdieBoard stats API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from database.connection import db
from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize DB pool on startup, close on shutdown."""
        await db.initialize(dsn=settings.database_url)
        app.state.db_manager = DatabaseManager(db.pool)
        yield
        await db.close()

    app = FastAPI(
        title="MyBirdieBoard Stats API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError):
        logger.error("Database error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Round store unavailable"})

    from api.routers import stats, users
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
