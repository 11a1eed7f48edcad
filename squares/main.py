"""
FastAPI application entrypoint for the Squares web service

What this file does:
- Builds the FastAPI app and configures templating (Jinja2)
- Loads the square store once at startup and hangs it on app.state
- Includes the square API router under /api
- Serves the grid page and a /health probe
- Reads settings from .env (SQUARES_FILE, HOST, PORT, LOG_LEVEL)

Run with `squares-web` or `uvicorn squares.main:app`.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from . import config
from .models import Health
from .routers.api import api_router
from .services.square_store import SquareStore

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def create_app(store: Optional[SquareStore] = None) -> FastAPI:
    """Build the app. Pass a store to use a specific file (tests do); otherwise SQUARES_FILE is used."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store if store is not None else SquareStore(config.squares_file())
        app.state.store.load()
        yield

    app = FastAPI(
        title="Squares API",
        version="0.1.0",
        description="Generates colored squares along an expanding spiral and keeps them in a JSON file.",
        lifespan=lifespan,
    )

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health", response_model=Health, include_in_schema=False)
    def health() -> Health:
        return Health()

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def home(request: Request):
        """
        Render the grid page. The current squares are embedded so the first paint
        doesn't wait on a fetch.
        """
        squares = [s.model_dump(mode="json") for s in request.app.state.store.squares]
        return templates.TemplateResponse(request, "index.html", {"squares": squares})

    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "squares.main:app",
        host=config.server_host(),
        port=config.server_port(),
        # one process only: the square list lives in memory
        workers=1,
        log_level=config.log_level().lower(),
    )


if __name__ == "__main__":
    main()
