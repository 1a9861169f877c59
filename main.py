"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from common import config
from services.access.facade import DataAccess
from services.auth.client import AuthClient
from services.auth import routes as auth_routes
from services.appeals import routes as appeals_routes
from services.dashboard import routes as dashboard_routes
from services.denials import routes as denials_routes
from services.documents.storage import FileStorage
from services.remote.database import RemoteDatabase
from services.store.mock_store import MockStore
import logging

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(
    store: Optional[MockStore] = None,
    remote: Optional[RemoteDatabase] = None,
    auth: Optional[AuthClient] = None,
    storage: Optional[FileStorage] = None,
    fallback_user_id: str = config.FALLBACK_USER_ID,
) -> FastAPI:
    """Build the app and the single store/collaborator instances it shares."""
    store = store or MockStore()
    remote = remote or RemoteDatabase.from_url(config.DATABASE_URL)
    auth = auth or AuthClient()
    storage = storage or FileStorage(config.STORAGE_ROOT, config.PUBLIC_STORAGE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if remote.create_tables().ok:
            logger.info("Database tables created successfully")
        else:
            logger.warning("Remote database unavailable, serving mock data")
        yield

    app = FastAPI(
        title="Denial Tracker",
        description="Tracks insurance claim denials and appeals",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.store = store
    app.state.auth = auth
    app.state.storage = storage
    app.state.access = DataAccess(remote, store, auth, fallback_user_id)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_routes.router)
    app.include_router(denials_routes.router)
    app.include_router(appeals_routes.router)
    app.include_router(dashboard_routes.router)

    # uploaded files are served at their public URLs
    app.mount("/files", StaticFiles(directory=storage.root_dir), name="files")

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "service": "Denial Tracker",
            "version": "1.0.0",
            "status": "operational",
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=8000)
