from __future__ import annotations

from fastapi import FastAPI

from backend.app.config import get_settings
from backend.app.routers import health, players, teams
from npb_scraper.logging_utils import setup_logging


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(level=settings.log_level)
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
    )
    app.include_router(health.router)
    app.include_router(teams.router)
    app.include_router(players.router)
    return app


app = create_app()


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
    )
