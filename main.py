from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
import logging
from config import API_PREFIX, CORS_ORIGINS, DATABASE_URL, DEBUG, HOST, LOG_LEVEL, PORT
from database import Database
from notifications.mailer import Notifier, SMTPTransport
from utils import error_response

# Import routers
from contact.router import router as contact_router
from newsletter.router import router as newsletter_router
from booking.router import router as booking_router
from admin.router import router as admin_router

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(db: Optional[Database] = None, notifier: Optional[Notifier] = None) -> FastAPI:
    """Build the API around one persistence handle and one notifier."""
    db = db or Database(DATABASE_URL)
    notifier = notifier or Notifier(db, SMTPTransport.from_config())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.create_tables()
        logger.info("Database schema initialized")
        yield
        db.close()

    # Create FastAPI instance with documentation configuration
    app = FastAPI(
        title="JiggerOnTheMix API",
        description="Contact inquiries, newsletter subscriptions, bookings and admin statistics for a mobile bar service",
        version="1.0.0",
        openapi_url=f"{API_PREFIX}/openapi.json",
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=f"{API_PREFIX}/redoc",
        lifespan=lifespan,
    )
    app.state.db = db
    app.state.notifier = notifier

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == 404 and detail == "Not Found":
            detail = "Endpoint not found"
        return error_response(detail, exc.status_code)

    # Handle validation errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Validation error: {exc}",
            extra={"path": request.url.path}
        )
        errors = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body")
            errors.append(f"{field}: {error['msg']}" if field else error["msg"])
        return error_response(errors, 400)

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        # Log exception with request details for better debugging
        logger.exception(
            f"Global exception: {exc}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "client": request.client.host if request.client else "unknown",
            }
        )
        message = str(exc) if DEBUG else "An error occurred"
        return error_response(["Internal server error", message], 500)

    app.include_router(contact_router, prefix=API_PREFIX)
    app.include_router(newsletter_router, prefix=API_PREFIX)
    app.include_router(booking_router, prefix=API_PREFIX)
    app.include_router(admin_router, prefix=API_PREFIX)

    # Health check endpoint
    @app.get(f"{API_PREFIX}/health")
    async def health_check():
        return {
            "status": "ok",
            "message": "JiggerOnTheMix API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()

# Run the application
if __name__ == "__main__":
    uvicorn.run("main:app", host=HOST, port=PORT, reload=DEBUG)
