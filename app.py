"""Main FastAPI application for the hardware tool host."""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Configure logging BEFORE importing any modules that use logger
log_level = os.getenv('LOG_LEVEL', 'INFO')
logging.basicConfig(
    level=getattr(logging, log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Import after logging is configured
from fastapi import FastAPI
from hwtools import __version__
from hwtools.routers import tools_router

# Create FastAPI app
app = FastAPI(
    title="Hardware Tool Host",
    description="Exposes manifest-described hardware tools to a language model",
    version=__version__
)

app.include_router(tools_router)  # /api/tools endpoints


@app.get("/")
async def root():
    return {"message": "Hardware Tool Host API", "docs": "/docs"}


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    from hwtools.dependencies import get_tool_registry

    logger.info("Starting Hardware Tool Host")
    registry = get_tool_registry()
    for instance in registry.get_all():
        logger.info(f"  - {instance.name} {instance.manifest.tool.version} -> {instance.binary_path}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Shutting down Hardware Tool Host")


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", "9090"))
    uvicorn.run("app:app", host="0.0.0.0", port=port, reload=True)
