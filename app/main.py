"""
Placement Review Platform - Main Application

FastAPI backend with:
- MongoDB for review documents
- PostgreSQL for user accounts
- DeepSeek AI for company summaries and preparation tips
  (statistics fallback when no API key is configured)
- JWT authentication

Run: uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.db.mongodb import init_mongo_indexes, test_mongo_connection
from app.db.postgres import init_postgres_schema, test_postgres_connection
from app.services.ai_service import AIService
from app.services.deepseek_client import DeepSeekClient

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Placement Review Platform",
    description="""
    Students share placement and interview experiences and browse others'.

    ## Features
    - **Authentication**: JWT-based auth for students and admins
    - **Reviews**: Submit, browse, filter and paginate placement reviews
    - **AI Summaries**: Company overview generated by DeepSeek
    - **Preparation Tips**: Role-specific guidance from past reviews
    - **Insights**: Rating, result, difficulty and trend statistics

    ## Databases
    - MongoDB: Review documents
    - PostgreSQL: User accounts
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# One model client per process, injected into routes via get_ai_service
app.state.ai_service = AIService(DeepSeekClient.from_settings(settings))

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes and the users table on startup."""
    try:
        init_mongo_indexes()
        logger.info("MongoDB indexes initialized")
    except Exception as e:
        logger.warning(f"MongoDB index initialization failed: {e}")

    try:
        init_postgres_schema()
    except Exception as e:
        logger.warning(f"PostgreSQL schema initialization failed: {e}")


@app.get("/", tags=["Health"])
async def root():
    """Welcome message with the main endpoints."""
    return {
        "success": True,
        "message": "Welcome to the Placement Review Platform API",
        "version": "1.0.0",
        "endpoints": {
            "GET /api/reviews": "Get all reviews",
            "GET /api/reviews/{id}": "Get specific review",
            "POST /api/reviews": "Create new review",
            "PUT /api/reviews/{id}": "Update review",
            "DELETE /api/reviews/{id}": "Delete review",
            "GET /api/reviews/stats": "Get statistics",
            "GET /api/ai/company/{company}/summary": "Company summary",
            "GET /api/ai/company/{company}/insights": "Company insights",
            "GET /api/ai/company/{company}/role/{role}/tips": "Preparation tips",
        },
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "postgres": "connected" if test_postgres_connection() else "disconnected",
        "mongodb": "connected" if test_mongo_connection() else "disconnected",
        "ai": "configured" if app.state.ai_service.is_available() else "fallback"
    }
