"""
NFT Registry API - Main Application Entry Point.

Hosts one or more controller-administered registries. On startup each
registry is initialized with the configured controller and restored from its
stored snapshot; on shutdown each registry is drained into a new snapshot.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nft_registry import __version__
from nft_registry.api.v1.router import api_router
from nft_registry.config import get_settings
from nft_registry.core.exceptions import BadParameters, OperationError, StorageException, Unknown
from nft_registry.services.factory import get_registry_services
from nft_registry.services.metrics import MetricsMiddleware
from nft_registry.storage import SnapshotStore, get_storage_backend

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Startup: initialize every registry, then import its stored snapshot.
    Shutdown: export every registry and store the snapshot. A registry whose
    snapshot cannot be saved keeps its records, the rest are still saved,
    and the failure is raised once all have been tried.
    A failed restore aborts startup.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Controller: {settings.CONTROLLER_ID}")
    logger.info(f"Dev mode (caller from header): {settings.DEV_MODE}")

    services = get_registry_services()
    store = SnapshotStore(get_storage_backend()) if settings.PERSIST_SNAPSHOTS else None

    for key, service in services.items():
        service.initialize(settings.CONTROLLER_ID)
        if store is None:
            continue
        entries = await store.load(key)
        if entries is not None:
            service.import_snapshot(entries)
            logger.info(f"Restored '{key}' with {len(entries)} records")

    yield

    failed: list[str] = []
    for key, service in services.items():
        entries = service.export_snapshot()
        if store is None:
            continue
        try:
            await store.save(key, entries)
        except Exception:
            logger.exception(f"Saving snapshot of '{key}' failed; keeping its records in memory")
            service.import_snapshot(entries)
            failed.append(key)

    logger.info(f"Shutting down {settings.PROJECT_NAME}")

    if failed:
        raise StorageException(
            message=f"Snapshot not saved for: {', '.join(failed)}",
            details={"registries": failed},
        )


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## NFT Registry API

Metadata registry for NFT and token canisters.

### Features
- **Open reads**: anyone can fetch a single record or list all records
- **Single controller**: only the controller may add or remove records,
  and only the controller may hand control to someone else
- **Typed details**: each record carries one `standard` detail whose value is
  a tagged union (true, false, u64, i64, float, text, principal, slice, vec)
- **Restart safety**: registries are snapshotted on shutdown and restored on startup
    """,
    version=__version__,
    openapi_tags=[
        {"name": "registry", "description": "Registry queries and controller updates"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)


@app.exception_handler(OperationError)
async def operation_error_handler(request: Request, exc: OperationError) -> JSONResponse:
    """Return the standard error body for registry operation failures."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable request bodies are reported as bad parameters."""
    error = BadParameters(
        "Request could not be decoded",
        details={"errors": [
            {"loc": [str(part) for part in e["loc"]], "msg": e["msg"]}
            for e in exc.errors()
        ]},
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized Unknown response.
    """
    logger.exception(f"Unexpected error: {exc}")
    error = Unknown("An unexpected error occurred")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "registries": sorted(settings.REGISTRIES),
        "docs": "/docs",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "nft_registry.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
