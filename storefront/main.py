from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from storefront.config import settings
from storefront.database import get_db, init_db, ping
from storefront.api.v1 import auth, products, cart
from storefront.middleware.timing import TimingMiddleware
import logging

# Configure logging
if not settings.DEBUG:
    from storefront.utils.logging_config import configure_logging
    configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # No degraded mode: if the store is unreachable the process must not start
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.critical("Failed to connect to database: %s", e)
        raise
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield


docs_url = "/docs" if settings.DEBUG else None
redoc_url = "/redoc" if settings.DEBUG else None

app = FastAPI(
    title=settings.APP_NAME,
    description="Storefront backend: accounts, catalog, cart and mock checkout",
    version=settings.APP_VERSION,
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if settings.DEBUG else None,
    lifespan=lifespan
)

app.add_middleware(TimingMiddleware)

# CORS Middleware
if settings.ENVIRONMENT == "production":
    origins = [o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()]
    if not origins:
        logger.warning("No ALLOWED_ORIGINS set in production!")
else:
    # In development, allow all
    origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)


# Exception Handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Client errors carry their text under ``message``"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400, not FastAPI's default 422"""
    def sanitize_error(error):
        """Convert error dict to JSON-serializable format"""
        if isinstance(error, dict):
            return {k: sanitize_error(v) for k, v in error.items()}
        elif isinstance(error, (list, tuple)):
            return [sanitize_error(item) for item in error]
        elif isinstance(error, bytes):
            return error.decode('utf-8', errors='replace')
        elif isinstance(error, (str, int, float, bool, type(None))):
            return error
        else:
            return str(error)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation error",
            "error": {
                "code": "VALIDATION_ERROR",
                "details": sanitize_error(exc.errors())
            }
        }
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store failures surface immediately as a server error, never retried"""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Database error",
            "error": {
                "code": "DATABASE_ERROR",
                "details": str(exc) if settings.DEBUG else "An error occurred"
            }
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Internal server error",
            "error": {
                "code": "SERVER_ERROR",
                "details": str(exc) if settings.DEBUG else "An error occurred"
            }
        }
    )


# Include Routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint"""
    ping(db)
    return {
        "status": "healthy",
        "service": settings.APP_NAME
    }


@app.get("/api/status")
def store_status(db: Session = Depends(get_db)):
    """Server and database connectivity"""
    ping(db)
    return {
        "status": "Server and database connected.",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
