import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_rules, get_settings
from src.rules.models import ApiRules, Rules

logger = logging.getLogger(__name__)


def _startup_rules() -> Rules:
    settings = get_settings()
    return get_rules(settings)


def _cors_origins() -> list[str]:
    # Runs at import time; a broken rules file is reported by the lifespan check
    try:
        return _startup_rules().api.cors_origins
    except (FileNotFoundError, ValueError) as e:
        logger.error("Rules unreadable, using default CORS origins: %s", e)
        return ApiRules().cors_origins


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load rules and validate on startup (fail-fast)
    try:
        rules = _startup_rules()
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logging.basicConfig(level=rules.logging.level.upper())
    logger.info("Rules loaded from %s", get_settings().rules_path)
    yield


app = FastAPI(
    title="OG Tag Lab API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import og  # noqa: E402

app.include_router(og.router, prefix="/api/og", tags=["OG Tags"])


# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
