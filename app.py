"""
CA Stub Test Helper Application - FastAPI Version
"""
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

# Import configuration and logging
from core.config import config, logger, APP_NAME, PORT
from core.repository import build_resource_repository

# Import routers
from web.routes import health_router, test_helpers_router

IS_DEVELOPMENT = config.is_development
ENABLE_TEST_HELPERS = config.enable_test_helpers


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("CA Stub starting...")
    yield
    # Shutdown
    logger.info("CA Stub shutting down...")

# Create FastAPI app
app = FastAPI(
    title=APP_NAME,
    description="Test helper endpoints for the Consent & Authorisation stub",
    version="1.0.0",
    docs_url="/docs" if IS_DEVELOPMENT else None,
    redoc_url="/redoc" if IS_DEVELOPMENT else None,
    lifespan=lifespan
)

app.state.resource_repository = build_resource_repository()

# Configure CORS
cors_origins = os.environ.get("CORS_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["health"])

# Test helpers expose stored tokens, never in production
if ENABLE_TEST_HELPERS:
    app.include_router(test_helpers_router, prefix="/test-helpers", tags=["test-helpers"])
    logger.info("Test helper endpoints enabled at /test-helpers/*")


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=PORT, reload=IS_DEVELOPMENT)
