import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_rules, get_settings
from src.app_shell.config import validate_ops_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
    except Exception as e:
        logger.critical("Rules load failed from %s: %s", settings.rules_path, e)
        sys.exit(1)

    validate_ops_rules(rules)
    logger.info("Rules loaded from %s", settings.rules_path)

    yield


app = FastAPI(
    title="Press Room Publisher Social Preview",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import meta, og, share  # noqa: E402

app.include_router(share.router, prefix="", tags=["Share"])
app.include_router(og.router, prefix="/api", tags=["Preview Image"])
app.include_router(meta.router, prefix="/api", tags=["Metadata"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "social-preview"}
