"""
BlogBuddy Backend - Main FastAPI Application
Serves blog pages, the demo article listing, and user post/profile CRUD
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv('.env.local')

from app.routes import articles, auth, pages, posts, profiles
from core.config import Config
from core.database import get_supabase

# Setup logging with rotation
logs_dir = Path(__file__).parent.parent / 'logs'
logs_dir.mkdir(parents=True, exist_ok=True)
log_file = logs_dir / 'blogbuddy_backend.log'

# Create handlers
file_handler = RotatingFileHandler(
    log_file,
    maxBytes=10_000_000,  # 10MB per file
    backupCount=5,  # Keep 5 backup files
    encoding='utf-8'
)
console_handler = logging.StreamHandler()

# Set format
log_format = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
file_handler.setFormatter(log_format)
console_handler.setFormatter(log_format)

# Configure root logger with environment variable support
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    handlers=[file_handler, console_handler]
)

logger = logging.getLogger(__name__)
logger.info(f"Logging to file: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown"""
    logger.info("BlogBuddy Backend starting up...")
    if not (Config.get_supabase_url() and Config.get_supabase_key()):
        logger.error("❌ SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are not set; post and profile routes will fail")
    yield
    logger.info("BlogBuddy Backend shutting down...")


# Create FastAPI app
app = FastAPI(
    title="BlogBuddy Backend",
    description="API for blog pages, article search and user posts",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
cors_origins = Config.get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(pages.router, prefix="/api", tags=["pages"])
app.include_router(articles.router, prefix="/api", tags=["articles"])
app.include_router(posts.router, prefix="/api", tags=["posts"])
app.include_router(profiles.router, prefix="/api", tags=["profiles"])
app.include_router(auth.router, prefix="/api", tags=["auth"])


@app.get("/health")
async def health_check():
    """
    Health check endpoint

    Returns:
        Health status and configuration checks
    """
    database_configured = bool(Config.get_supabase_url() and Config.get_supabase_key())

    # Test database connection
    database_connected = False
    if database_configured:
        try:
            get_supabase().table(Config.POSTS_TABLE).select('id').limit(1).execute()
            database_connected = True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")

    return {
        "status": "healthy",
        "database_configured": database_configured,
        "database_connected": database_connected,
        "cors_origins": cors_origins
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "BlogBuddy Backend API",
        "version": "1.0.0",
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
