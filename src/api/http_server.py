"""FastAPI HTTP server setup."""

from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import logging

from database import TaskStore
from .endpoints import router

logger = logging.getLogger(__name__)


def create_app(store: TaskStore, cors_origins: Optional[list] = None) -> FastAPI:
    """Build the API around an already initialized task store."""
    app = FastAPI(
        title="Todo API",
        description="A minimal to-do list backend",
        version="1.0.0"
    )
    app.state.store = store

    # Configure CORS
    origins = cors_origins if cors_origins is not None else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Liveness probe."""
        return "Todo API is running!"

    app.include_router(router, prefix="/api")

    return app
