from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.controllers.v1.auth.auth import router as auth_router
from app.controllers.v1.project_management.project import router as project_router
from app.controllers.v1.user_management.user import router as user_router
from app.controllers.v1.analytics.analytics import router as analytics_router
from app.controllers.v1.export.export import router as export_router
from app.controllers.v1.energy_sync.energy_sync import router as energy_sync_router
from app.database.conn import mongo_client
from app.database.schema import ensure_collections_and_indexes
from app.utils.logger_utils import logger
from config import CORS_CONFIG

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""

    # Startup
    logger.info("🚀 Starting up the application...")
    await mongo_client.connect()
    try:
        await ensure_collections_and_indexes()
        logger.info("✅ Ensured DB schema (collections, validators, indexes)")
    except Exception as e:
        logger.warning(f"⚠️ Failed to ensure DB schema: {e}")

    yield

    # Shutdown
    logger.info("🛑 Shutting down the application...")
    await mongo_client.close()

# Create FastAPI application
app = FastAPI(title="Renewable Energy Projects Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_CONFIG["ALLOW_ORIGINS"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router, tags=["Auth"])
app.include_router(project_router, tags=["Project"])
app.include_router(analytics_router, tags=["Analytics"])
app.include_router(user_router, tags=["User"])
app.include_router(export_router, tags=["Export"])
app.include_router(energy_sync_router, tags=["Sync"])


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "database": "connected" if mongo_client.is_connected else "disconnected"}
