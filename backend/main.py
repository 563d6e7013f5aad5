import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from audit.recorder import BackgroundAuditRecorder, get_audit_recorder
from core.config import get_settings
from core.database import init_database, dispose_database
from core.logging import setup_logging
from routes.api_v1 import api_v1_router
from version import get_version

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=get_version())

# CORS: defined here only, before any routers.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

app.include_router(api_v1_router)


@app.on_event("startup")
async def on_startup() -> None:
    """Application startup hook."""
    await init_database(settings.database_url, create_schema=True)
    logger.info("CORS allow_origins=%s audit_enabled=%s", settings.cors_origins, settings.audit_enabled)
    logger.info("Application startup complete")


@app.on_event("shutdown")
async def on_shutdown() -> None:
    """Application shutdown hook: flush pending audit writes before closing the store."""
    recorder = get_audit_recorder()
    if isinstance(recorder, BackgroundAuditRecorder):
        await recorder.drain()
    await dispose_database()
    logger.info("Application shutdown complete")


@app.get("/health")
async def health() -> dict:
    """Simple health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    # python main.py from backend/; HOST and PORT override the local defaults
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_level=settings.log_level.lower(),
    )
