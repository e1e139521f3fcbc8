# RevisionCompare - backend

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
)

from routers import compare

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Field-level comparison of content revisions: per-field line states for side-by-side diff rendering.",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(compare.router, prefix="/api/v1/compare", tags=["Compare"])

@app.get("/api/v1/health")
async def health_check():
    """Service health"""
    return {
        "status": "ok",
        "version": settings.APP_VERSION,
        "message": f"{settings.APP_NAME} is running",
    }

if __name__ == "__main__":
    logger.info(f"Starting {settings.APP_NAME} on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
