"""
Lingran Blog Backend - FastAPI Application

A minimal blogging API: user accounts with JWT sessions and articles
persisted in a single JSON file.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api import __version__
from blog_api.config import get_settings
from blog_api.database.connections import close_store, get_store
from blog_api.routers import articles, auth, health

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("blog_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the document store and report where it lives

    Shutdown:
    - Release the store instance
    """
    logger.info("Starting up Lingran Blog Backend...")

    store = await get_store()
    try:
        store.check()
    except OSError as e:
        logger.warning("Data file is not writable yet: %s", e)

    logger.info("API address: http://%s:%s", settings.host, settings.port)
    logger.info("Data file: %s", store.path.resolve())

    yield

    logger.info("Shutting down Lingran Blog Backend...")
    await close_store()


# Create FastAPI application
app = FastAPI(
    title="Lingran Blog API",
    description="""
## Lingran Blog API

A minimal blogging backend.

### Features
- **Accounts**: Registration and login with bcrypt-hashed passwords
- **Sessions**: JWT bearer tokens valid for 7 days
- **Articles**: Public listing, publishing and deletion by author or admin

### Authentication
Protected endpoints require a JWT token in the Authorization header:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /api/login`.

### Errors
Every error response has the shape `{"error": "<message>"}`.
    """,
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def catch_unhandled_errors(request: Request, call_next):
    """
    Last-resort handler for unexpected failures such as an unwritable data file.

    Registered before CORS so the 500 response still passes through
    CORSMiddleware. The traceback is logged; the client only sees the
    exception text when EXPOSE_ERROR_DETAILS is enabled.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)

        message = "Internal server error"
        if get_settings().expose_error_details:
            message = f"{message}: {exc}"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message},
        )


# Configure CORS (outermost, wraps the error middleware above)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(articles.router)


# ==================== Error Envelope ====================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as `{"error": message}`."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are a bad request."""
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Lingran Blog API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
