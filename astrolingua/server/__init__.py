# astrolingua/server/__init__.py
"""AstroLingua play server - HTTP controls plus an SSE snapshot stream."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from .config import settings

if TYPE_CHECKING:
    from ..session.controller import Session

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("astrolingua.server")

_server_start_time: float = 0.0


def _default_session() -> Session:
    from ..config import GameConfig
    from ..session.controller import Session
    from ..vocab import load_vocabulary

    vocabulary = load_vocabulary(settings.VOCAB_PATH) if settings.VOCAB_PATH is not None else None
    return Session(GameConfig(seed=settings.SEED), vocabulary=vocabulary)


def create_app(*, session: Session | None = None, auto_tick: bool | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session: Session to serve; built from settings when omitted.
        auto_tick: Run the background game loop while the app is up.
            Defaults to ``settings.AUTO_TICK``.
    """
    from .models import HealthResponse
    from .routes import session as session_routes
    from .routes import stream
    from .runner import SessionRunner
    from .sse import SnapshotHub

    hub = SnapshotHub()
    runner = SessionRunner(session or _default_session(), hub, tick_hz=settings.TICK_HZ)
    tick = settings.AUTO_TICK if auto_tick is None else auto_tick

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        global _server_start_time
        _server_start_time = time.time()
        logger.info(f"AstroLingua server starting on {settings.HOST}:{settings.PORT}")
        if tick:
            runner.start()
        yield
        logger.info("AstroLingua server shutting down...")
        await runner.stop()
        hub.close_all()

    app = FastAPI(lifespan=lifespan, title="AstroLingua")
    app.state.hub = hub

    session_routes.init_session_routes(runner)
    stream.init_stream_routes(hub)
    app.include_router(session_routes.router)
    app.include_router(stream.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            clients=hub.client_count,
            uptime_s=time.time() - _server_start_time if _server_start_time else 0.0,
            session=runner.session.status.value,
        )

    return app
