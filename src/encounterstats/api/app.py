"""FastAPI application factory.

The api layer validates upstream payloads, calls the aggregation core
and returns view models for the dashboard. It does not fetch from the
upstream log API and does not persist anything.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from encounterstats.api.settings import get_cors_origins


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="encounterstats API",
        description="Player leaderboards and class performance distributions",
        version="0.1.0",
    )

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from encounterstats.api.routes import leaderboard, statistics

    app.include_router(leaderboard.router, prefix="/api")
    app.include_router(statistics.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
