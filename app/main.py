import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import Settings, load_settings
from app.core.movie_store import MovieStore
from app.core.exceptions import MovieError
from app.api.routes import movies
from app.api.errors import http_error_handler, movie_error_handler, request_validation_error_handler
from app.api.cors import cors_gate
from app.models.error import MessageResponse
from ingestion.ingest import load_movies

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MovieStore] = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.movie_store is None:
            app.state.movie_store = MovieStore(load_movies(settings.data_path))
        yield

    app = FastAPI(
        title="Movies API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.movie_store = store

    @app.get("/", response_model=MessageResponse)
    def root():
        return MessageResponse(message="hola mundo")

    app.include_router(movies.router, prefix="/movies", tags=["movies"])

    app.add_exception_handler(MovieError, movie_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["GET", "HEAD", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )
    # registered last so it wraps CORSMiddleware and runs before anything else
    app.middleware("http")(cors_gate)

    return app


app = create_app()


def run(settings: Optional[Settings] = None):
    settings = settings or load_settings()
    logger.info("server listening on port http://localhost:%s", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, server_header=False)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run()
