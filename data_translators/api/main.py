"""Data Translators API - conversion service.

Exposes the translators over HTTP:
- Target catalog (keys, aliases, supported options)
- Conversion to HTML, R, Wolfram Language and JSON
- Dataset normalization and shape classification
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from data_translators import __version__
from data_translators.api.routes import convert, targets
from data_translators.translators.registry import get_target_registry

# Configure logging
logging.basicConfig(
    level=os.environ.get("DATA_TRANSLATORS_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: pre-load the target catalog
    logger.info("Loading target definitions...")
    target_registry = get_target_registry()
    logger.info(f"Loaded {target_registry.count()} targets")

    logger.info("Data Translators API ready")
    yield
    logger.info("Shutting down Data Translators API")


app = FastAPI(
    title="Data Translators API",
    description="""
## Data Translation Service

Converts JSON data into HTML tables, R data frames, Wolfram Language
literals or JSON text.

### Key Endpoints

- `GET /v1/targets` - List conversion targets
- `POST /v1/convert` - Convert data to a target
- `POST /v1/datasets` - Normalize ragged data into a rectangular dataset
- `POST /v1/classify` - Classify the shape of data
""",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(targets.router, prefix="/v1")
app.include_router(convert.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Data Translators API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "targets": "/v1/targets",
            "convert": "/v1/convert",
            "datasets": "/v1/datasets",
            "classify": "/v1/classify",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    target_registry = get_target_registry()
    return {
        "status": "healthy",
        "targets_loaded": target_registry.count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "data_translators.api.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8001")),
        reload=True,
    )
