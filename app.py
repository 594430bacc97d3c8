"""
Teams API application setup.

- Registers the teams router under the configured API prefix
- Maps domain and store errors to JSON error responses
- Creates the database schema on startup
"""

import logging
from typing import Optional

from dotenv import load_dotenv  # type: ignore

# ───────────────────── env / init ─────────────────────
# .env must be loaded before config and core.db read the environment
load_dotenv()

from fastapi import FastAPI, Request  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from config import get_config
from config.base import BaseConfig
from core.db import ensure_engine
from logging_config import configure_logging
from routes.teams import router as teams_router
from shared.exceptions import (
    StoreError,
    TeamsAppError,
    ValidationError,
    create_error_response,
    handle_exception,
)

logger = logging.getLogger(__name__)


def create_app(config: Optional[BaseConfig] = None) -> FastAPI:
    config = config or get_config()
    configure_logging(config.logging)
    ensure_engine(config.database)

    application = FastAPI(
        title=config.api.title,
        version=config.app_version,
        description="CRUD API for sports team records",
        debug=config.debug,
    )
    application.state.config = config

    if config.api.allowed_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=config.api.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    application.include_router(teams_router, prefix=config.api.prefix)

    @application.exception_handler(ValidationError)
    def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Validation failed on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=400, content=exc.to_dict())

    @application.exception_handler(StoreError)
    def _store_error(request: Request, exc: StoreError) -> JSONResponse:
        body = handle_exception(exc, logger, context={"path": request.url.path})
        return JSONResponse(status_code=500, content=body)

    @application.exception_handler(TeamsAppError)
    def _app_error(request: Request, exc: TeamsAppError) -> JSONResponse:
        handle_exception(exc, logger, context={"path": request.url.path})
        return JSONResponse(status_code=500, content=create_error_response(exc, 500))

    @application.on_event("startup")
    def _run_startup() -> None:
        from startup import run_startup_tasks
        run_startup_tasks(config)

    @application.get(f"{config.api.prefix}/health")
    def health() -> dict:
        return {"status": "ok", "version": application.version}

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
