import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartlink.api.deps import get_rules
from smartlink.app_shell.config import validate_ops_rules

logger = logging.getLogger("smartlink.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logging.basicConfig(level=rules.logging.level, format="%(levelname)s %(name)s: %(message)s")
    validate_ops_rules(rules)
    logger.info("SmartLink API ready (backend=%s)", rules.storage.backend)

    yield


app = FastAPI(
    title="SmartLink API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from smartlink.api.routes import links, profile, snapshot, stats, theme  # noqa: E402

app.include_router(profile.router, prefix="/api", tags=["Profile"])
app.include_router(links.router, prefix="/api", tags=["Links"])
app.include_router(stats.router, prefix="/api", tags=["Stats"])
app.include_router(theme.router, prefix="/api", tags=["Theme"])
app.include_router(snapshot.router, prefix="/api", tags=["Snapshot"])


# CORS (Allow local frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "smartlink"}
