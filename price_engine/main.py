from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from price_engine import __version__
from price_engine.api.routes import router as api_router
from price_engine.core.logging_config import configure_logging
import logging
import traceback

log_filename = configure_logging()

logger = logging.getLogger(__name__)
logger.info("=" * 80)
logger.info(f"Starting price engine - Log file: {log_filename or 'console only'}")
logger.info("=" * 80)

# Create FastAPI app
app = FastAPI(
    title="Price Comparison API",
    description="API for comparing product prices across Indian e-commerce platforms",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception handler caught: {exc}")
    logger.error(traceback.format_exc())
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc)},
    )

# Health check endpoint
@app.get("/health")
def health_check():
    """Check if the API is healthy."""
    return {"status": "healthy"}
