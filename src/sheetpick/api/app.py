"""FastAPI application."""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sheetpick import __version__
from sheetpick.config import Config, get_config
from sheetpick.errors import (
    DecryptionFailure,
    EmptyDataset,
    NoColumnsSelected,
    SheetPickError,
    UnexpectedProcessingFailure,
)
from sheetpick.session import ExtractionSession

from .routes import columns, files, status


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DecryptionFailure: 422,
    EmptyDataset: 422,
    NoColumnsSelected: 400,
    UnexpectedProcessingFailure: 500,
}


async def handle_sheetpick_error(request: Request, exc: SheetPickError) -> JSONResponse:
    """Report pipeline failures as a plain message."""
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        app.state.session = ExtractionSession(config=config)
        logger.info("Extraction session ready")
        yield
        app.state.session.reset()

    app = FastAPI(
        title="SheetPick",
        description="Decrypt spreadsheets, pick columns and export them",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SheetPickError, handle_sheetpick_error)

    # Include routers
    app.include_router(files.router, prefix="/api", tags=["files"])
    app.include_router(columns.router, prefix="/api", tags=["columns"])
    app.include_router(status.router, prefix="/api", tags=["status"])

    return app
