"""FastAPI application for the tender search gateway."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .api.routes import search
from .dependencies.cloud_function import init_client, close_client

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.debug else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting tender search gateway...")
    try:
        init_client(settings)
        logger.info("Cloud Function client initialized")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise

    yield

    # Shutdown
    logger.info("Shutting down tender search gateway...")
    await close_client()


# Create FastAPI app
app = FastAPI(
    title="Tender Search Gateway",
    description="Authenticated proxy from the web frontend to the tender search Cloud Function",
    version="1.0.0",
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Tender Search Gateway",
        "version": "1.0.0",
        "endpoints": {
            "search": "/search - Tender search (POST)",
            "health": "/health - Liveness probe",
            "docs": "/docs - API documentation"
        }
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "tender_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
