# /student_db/main.py

# --- Core FastAPI Imports ---
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Router Imports ---
from .routers import students_router

# --- Service Imports for Startup Logic ---
from .services.asset_store import AssetStore
from .services.database_service import DatabaseService, get_database_service
from .services.directory_service import DirectoryService
from .utils.logging import get_logger

logger = get_logger()


def create_app(database: Optional[DatabaseService] = None, assets: Optional[AssetStore] = None) -> FastAPI:
    """
    Builds the API. Store and asset store default to the environment
    settings; tests pass their own.
    """

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # This code runs ONCE when the application starts up.
        db = database or get_database_service()
        directory = DirectoryService(db, assets or AssetStore())
        await directory.refresh()
        logger.info("Directory ready with %d students", len(directory.students))
        app.state.directory = directory
        yield
        # This code runs ONCE when the application shuts down.
        db.dispose()

    # --- FastAPI Application Instance Creation ---
    app = FastAPI(
        title="Student Directory API",
        description="Local student records with photos: list, search, edit and delete.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- API Router Inclusion ---
    app.include_router(students_router.router, prefix="/api/students", tags=["Students"])

    # --- Root / Health Check Endpoint ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {"status": "Student Directory is running!", "version": app.version}

    return app


app = create_app()
