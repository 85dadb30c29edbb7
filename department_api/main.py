"""
Application factory for the Department API.

``create_app`` configures logging, middleware, error handlers and routes;
the module-level ``app`` is what uvicorn serves::

    uvicorn department_api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from department_api.api.v1.api import api_router
from department_api.core.config import settings
from department_api.core.database import engine, get_async_session
from department_api.core.error_handlers import register_exception_handlers
from department_api.core.logging_config import setup_logging
from department_api.db.init_db import init_db
from department_api.middleware.logging import LoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await init_db()
    yield
    await engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=settings.ALLOWED_METHODS,
        allow_headers=settings.ALLOWED_HEADERS,
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["System"])
    async def root():
        return {
            "message": f"Welcome to the {settings.PROJECT_NAME}",
            "status": "active",
            "version": settings.VERSION,
            "docs": "/docs",
        }

    @app.get("/health", tags=["System"])
    async def health_check(session: AsyncSession = Depends(get_async_session)):
        try:
            await session.execute(text("SELECT 1"))
            database = "connected"
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            database = "disconnected"

        healthy = database == "connected"
        return JSONResponse(
            status_code=200 if healthy else 503,
            content={
                "status": "healthy" if healthy else "unhealthy",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "components": {"database": database},
            },
        )

    return app


app = create_app()
