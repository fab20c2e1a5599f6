# admin_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from admin_api.core.config import Settings, get_settings
from admin_api.core.logging_config import configure_logging
from admin_api.database import Database
from admin_api.routes import health, orders, products, stats

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Input problems share the single server-error class with store failures
    logger.error(f"Rejected request {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=500, content={"error": "Invalid request"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from one Settings instance."""
    if settings is None:
        settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The connection mode is decided here, once, for the life of the process
        app.state.database = Database.from_config(
            settings.database_config(),
            **settings.pool_options(),
        )
        base_url = f"http://localhost:{settings.PORT}"
        logger.info(f"Server running on {base_url}")
        logger.info(f"API available at {base_url}/api")
        logger.info(f"Health check: {base_url}/health")
        try:
            yield  # This is where the app runs
        finally:
            await app.state.database.dispose()

    app = FastAPI(
        title="E-commerce Admin API",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(stats.router)
    app.include_router(health.router)
    return app


app = create_app()
