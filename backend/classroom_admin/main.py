"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classroom_admin.config import get_settings
from classroom_admin.domain.exceptions import MalformedInputError
from classroom_admin.infrastructure.dependencies import get_sse_notifier
from classroom_admin.infrastructure.logging.log_config import setup_logging
from classroom_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, close SSE clients on shutdown."""
    settings = get_settings()
    setup_logging()

    if not (settings.apper_project_id and settings.apper_public_key):
        logger.warning(
            "APPER_PROJECT_ID / APPER_PUBLIC_KEY are not configured; "
            "every resource call will fail."
        )

    yield

    await get_sse_notifier().shutdown()


async def _malformed_input_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MalformedInputError, _malformed_input_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "classroom_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
