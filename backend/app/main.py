"""
SEO Scanner - FastAPI Application Entry Point
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1.endpoints import health, scan
from app.api.v1.endpoints.scan import error_response
from app.logger import logger
from app.services.scan_runner import MISSING_URL_MESSAGE

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Lighthouse-based SEO scan with AI-generated improvement suggestions",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(scan.router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unreadable or missing JSON body: same 400 as a missing URL."""
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return error_response(400, MISSING_URL_MESSAGE, "missing_url")


@app.on_event("startup")
async def startup():
    """Log configuration state on startup."""
    logger.info(f"Starting {settings.APP_NAME}...")
    for provider, configured in settings.configured_providers().items():
        if not configured:
            logger.warning(f"{provider} API key is not configured; scans will fail until it is set")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
