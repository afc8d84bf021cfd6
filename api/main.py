"""FastAPI application for the Golf Handicap API."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database.connection import db
from database.db_manager import DatabaseManager
from events.handlers import build_dispatcher

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cors_origins() -> list:
    raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool and event handlers on startup, close the pool on shutdown."""
    configure_logging()
    await db.initialize(dsn=os.environ.get("DATABASE_URL"))
    app.state.db_manager = DatabaseManager(db.pool)
    app.state.dispatcher = build_dispatcher(app.state.db_manager)
    logger.info("Golf Handicap API started")
    yield
    await db.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Golf Handicap API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import friends, leaderboard, rounds, triggers, users
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["leaderboard"])
    app.include_router(friends.router, prefix="/api/friends", tags=["friends"])
    app.include_router(triggers.router, prefix="/api/events", tags=["events"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
