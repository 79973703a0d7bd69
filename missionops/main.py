# missionops/main.py
from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from missionops.db import healthcheck
from missionops.errors import MissionOpsError
from missionops.routers.mission_types import router as mission_types_router
from missionops.routers.missions import router as missions_router
from missionops.routers.directory import router as directory_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _error_response(_request: Request, exc: MissionOpsError) -> JSONResponse:
    # 400 fix your input, 404 refresh, 409/503 retry later, 422 illegal task move
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


def build_app() -> FastAPI:
    app = FastAPI(title="Mission Ops API")

    # CORS (adjust origins as you need)
    frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://localhost:5173")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[frontend_origin],
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1|0\.0\.0\.0)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.add_exception_handler(MissionOpsError, _error_response)

    # Health
    @app.get("/health")
    def health():
        return healthcheck()

    app.include_router(mission_types_router)
    app.include_router(missions_router)
    app.include_router(directory_router)

    return app


app = build_app()
