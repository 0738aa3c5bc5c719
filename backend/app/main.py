"""FastAPI application entry point for the Workout Tracker API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.database import create_tables
from app.routers import plans, sets, suggestions, users, workouts

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create database tables
    create_tables()
    yield


app = FastAPI(
    title="Workout Tracker API",
    description="Backend API for the Workout Tracker - plans, workout logging, and training suggestions",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS - allow the frontend in development and production
cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log store failures and report them as 500s."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


# Include routers
app.include_router(users.router, prefix="/api", tags=["Users"])
app.include_router(plans.router, prefix="/api", tags=["Plans"])
app.include_router(workouts.router, prefix="/api", tags=["Workouts"])
app.include_router(sets.router, prefix="/api", tags=["Sets"])
app.include_router(suggestions.router, prefix="/api", tags=["Suggestions"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Workout Tracker API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health", tags=["Health"])
@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
