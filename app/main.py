"""FastAPI application entrypoint for the advocates directory."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import router as api_router
from .dependencies import get_advocate_repo, get_settings
from .logging_config import setup_logging
from .repos import AdvocateRepo

logger = logging.getLogger(__name__)

app = FastAPI(title="Advocates Directory API", version="0.1.0")
app.include_router(api_router)

# Browser clients are read-only
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.on_event("startup")
def configure_app() -> None:
    """Prime configuration cache and logging during startup."""

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("advocates directory starting (env=%s)", settings.app_env)


@app.exception_handler(Exception)
def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.get("/health/live", status_code=status.HTTP_200_OK, include_in_schema=False)
def health_live() -> dict[str, str]:
    """Process is up; does not touch the database."""

    return {"status": "live"}


@app.get("/health/ready", include_in_schema=False)
def health_ready(repo: AdvocateRepo = Depends(get_advocate_repo)):
    """Ready once the advocates database answers a trivial query."""

    try:
        repo.ping()
    except Exception:  # noqa: BLE001
        logger.exception("readiness check: database unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Database unavailable"},
        )
    return {"status": "ready", "environment": get_settings().app_env}


__all__ = ["app"]
