"""
FastAPI application serving the library to ComicGlass clients.
"""

import logging

from fastapi import FastAPI

from comicglass.api.routers import router as library_router
from comicglass.container import container

# Configure logging
logging.basicConfig(
    level=container.get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="ComicGlass Library Server")
app.include_router(library_router)

logger.info(f"Serving library root: {container.get_settings().library_root}")
