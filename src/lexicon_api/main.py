#!/usr/bin/env python3

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .core.auth import verify_token
from .core.config import get_schema_sync_config
from .core.deadline import Deadline
from .core.dependencies import cleanup_connections, get_affix_service, get_dgraph_client, get_schema_synchronizer
from .core.env_utils import getenv_clean, getenv_int, getenv_list
from .core.logging import setup_logging
from .models.models import NewAffix, ResetRequest

logger = logging.getLogger(__name__)

# Application start time for uptime calculation
_app_start_time = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    setup_logging()
    logger.info("Starting Lexicon API service")

    await startup_tasks()

    yield

    # Shutdown
    logger.info("Shutting down Lexicon API service")
    cleanup_connections()


async def startup_tasks():
    """Bring the database schema in line with the schema document"""
    sync_config = get_schema_sync_config()
    if not sync_config.SYNC_ON_STARTUP:
        logger.info("Schema sync on startup disabled (SCHEMA_SYNC_ON_STARTUP=false)")
        return

    deadline = Deadline(timeout=sync_config.SYNC_TIMEOUT)
    try:
        synchronizer = get_schema_synchronizer()
        # Blocks while the database warms up; keep it off the event loop
        await asyncio.to_thread(synchronizer.create, deadline)
        logger.info("Startup tasks completed successfully")

    except asyncio.CancelledError:
        # Shutdown during startup: the worker thread stops at its next readiness check
        logger.warning("Startup cancelled, abandoning schema sync")
        deadline.cancel()
        raise

    except Exception as e:
        logger.error(f"Startup tasks failed: {e}")
        raise


app = FastAPI(
    title="Lexicon API",
    description="API for the lexicon graph database and its schema",
    version=os.getenv("APP_VERSION", "unknown"),
    lifespan=lifespan
)

# CORS middleware
allowed_origins = getenv_list("CORS_ORIGINS", ["http://localhost:3000"])
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_version_header(request, call_next):
    """Add version information to response headers"""
    response = await call_next(request)
    response.headers["X-API-Version"] = os.getenv("APP_VERSION", "unknown")
    return response


@app.get("/healthz")
async def health_check():
    """Liveness probe - checks if application is alive and can serve requests"""
    current_time = time.time()
    return {
        "status": "healthy",
        "timestamp": current_time,
        "uptime": current_time - _app_start_time,
        "api_version": os.getenv("APP_VERSION", "unknown"),
        "git_commit": os.getenv("GIT_COMMIT", "unknown"),
    }


@app.get("/readyz")
def readiness_check():
    """Readiness probe - Dgraph alpha must answer its health endpoint"""
    try:
        get_dgraph_client().health()
        return {"status": "ready"}

    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail={"status": "not_ready"}) from e


# Admin Routes

@app.get("/api/admin/schema")
def get_schema_status(
    token: str = Depends(verify_token),
    synchronizer=Depends(get_schema_synchronizer)
):
    """Compare the live schema with the schema document"""
    from .handlers.admin import handle_schema_status
    return handle_schema_status(synchronizer)


@app.post("/api/admin/schema/sync")
def sync_schema(
    token: str = Depends(verify_token),
    synchronizer=Depends(get_schema_synchronizer)
):
    """Install the schema document if the live schema differs"""
    from .handlers.admin import handle_schema_sync
    return handle_schema_sync(synchronizer)


@app.post("/api/admin/reset")
def reset_database(
    request: ResetRequest,
    token: str = Depends(verify_token),
    synchronizer=Depends(get_schema_synchronizer)
):
    """Drop all data and schema (dry run first to get a confirm_token)"""
    from .handlers.admin import handle_reset
    return handle_reset(request, synchronizer)


# Affix Routes

@app.post("/api/affix")
def add_affix(
    new_affix: NewAffix,
    token: str = Depends(verify_token),
    service=Depends(get_affix_service)
):
    """Add an affix"""
    from .handlers.affix import handle_add_affix
    return handle_add_affix(new_affix, service)


@app.get("/api/affix/{affix_id}")
def get_affix(affix_id: str, service=Depends(get_affix_service)):
    """Get an affix by id"""
    from .handlers.affix import handle_get_affix
    return handle_get_affix(affix_id, service)


@app.get("/api/affix")
def find_affix(morpheme: str, service=Depends(get_affix_service)):
    """Get the affix with the given morpheme"""
    from .handlers.affix import handle_find_affix
    return handle_find_affix(morpheme, service)


if __name__ == "__main__":
    import uvicorn
    host = getenv_clean("API_HOST", "0.0.0.0")  # nosec B104
    port = getenv_int("API_PORT", 8000)
    uvicorn.run(app, host=host, port=port)
