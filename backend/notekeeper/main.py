"""
Notekeeper - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
import logging

from . import __version__
from .config import settings
from .database import NoteStore, get_store
from .routes import notes_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting {settings.app_name}...")
    store = get_store()
    logger.info(f"Data file: {store.path.resolve()}")

    if store.is_writable():
        logger.info("✓ Data file is writable")
    else:
        logger.warning("⚠ Data file is not writable - changes will fail")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")


# Create FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Single-user notes backed by a JSON file",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=settings.origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(notes_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Serve the browser UI"""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
async def health_check(store: NoteStore = Depends(get_store)):
    """Health check endpoint with storage status"""
    writable = store.is_writable()

    return {
        "status": "healthy" if writable else "degraded",
        "storage": "writable" if writable else "read-only",
        "version": __version__,
    }


@app.get("/api")
async def api_root():
    """API root endpoint"""
    return {"message": f"{settings.app_name} API", "status": "running"}
