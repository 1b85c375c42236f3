import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iboc.adapters.sqlite.migrator import SQLiteMigrator
from iboc.api.deps import get_settings
from iboc.rules.loader import load_rules

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and migrate on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        applied = SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()
        if applied:
            logger.info("Applied migrations: %s", ", ".join(applied))
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        logger.critical("Startup failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="IBOC Admin API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from iboc.api.routes import (  # noqa: E402
    auth,
    dashboard,
    events,
    finance,
    media,
    members,
    patrimony,
    public,
    public_ssr,
    site_content,
    social_projects,
    system,
)

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(members.router, prefix="/api/members", tags=["Members"])
app.include_router(finance.router, prefix="/api/finance", tags=["Finance"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(patrimony.router, prefix="/api/assets", tags=["Assets"])
app.include_router(social_projects.router, prefix="/api/social-projects", tags=["Social"])
app.include_router(site_content.router, prefix="/api/site-content", tags=["Site Content"])
app.include_router(media.router, prefix="/api/media", tags=["Media"])
app.include_router(system.router, prefix="/api/system", tags=["System"])
app.include_router(public.router, prefix="/api/public", tags=["Public"])
app.include_router(media.public_router, prefix="/media", tags=["Media Public"])
app.include_router(public_ssr.router, prefix="", tags=["SSR"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
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
    return {"status": "ok", "service": "api"}
