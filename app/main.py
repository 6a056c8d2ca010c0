"""
Main application entry point.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings, print_config_info
from app.core.middleware import BodySizeLimitMiddleware
from app.db.mongodb import MongoDB

# Import API routers
from app.api.auth.router import router as auth_router
from app.api.employees.router import router as employees_router

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title=settings.PROJECT_NAME)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Reject oversized request bodies
app.add_middleware(BodySizeLimitMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed requests are client errors."""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request payload"}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors. Details are logged, never returned."""
    logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"}
    )


# Startup and shutdown events
@app.on_event("startup")
async def startup_event():
    """Event triggered on application startup."""
    print_config_info()

    mongodb = MongoDB(settings.MONGODB_URL, settings.MONGODB_DB)
    mongodb.connect_to_mongodb()
    app.state.mongodb = mongodb

    try:
        await mongodb.ensure_indexes()
    except Exception as e:
        logger.error(f"Error ensuring MongoDB indexes: {str(e)}", exc_info=True)

    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Event triggered on application shutdown."""
    mongodb = getattr(app.state, "mongodb", None)
    if mongodb is not None:
        await mongodb.close_mongodb_connection()

    logger.info("Application shutdown")


# Include API routers
app.include_router(employees_router, prefix="/employees", tags=["employees"])
app.include_router(auth_router, tags=["authentication"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
