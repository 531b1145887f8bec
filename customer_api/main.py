"""
Customer Records API
Main FastAPI application
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager

from customer_api.config import get_settings
from customer_api.exceptions import InvalidArgumentError, RecordNotFoundError
from customer_api.utils.logger import log
from customer_api import __version__

# Import routers
from customer_api.api import customers, health

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    log.info(f"Starting {settings.app_name} v{__version__}")
    log.info(f"Environment: {settings.environment}")

    from customer_api.models.base import init_db
    init_db()
    log.info("Database initialized")

    yield

    # Shutdown
    log.info("Shutting down application")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="""
    Customer records with derived loyalty tiers

    - Create, fetch, update and delete customers
    - Look customers up by id, name, email, or name and email
    - Every response carries a Silver / Gold / Platinum tier computed
      from annual spend and last purchase date
    """,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Rejected input: 400 with the message as the body"""
    log.warning(f"Invalid argument on {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(RecordNotFoundError)
async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
    """No record at the requested key"""
    log.info(f"Not found on {request.url.path} (lookup={exc.lookup})")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unparseable body, path or query values are bad requests"""
    log.warning(f"Request validation failed on {request.url.path}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(customers.router)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "app": settings.app_name,
        "version": __version__,
        "description": "Customer records with derived loyalty tiers",
        "docs": "/docs",
        "health": "/health",
        "status": "/status",
        "endpoints": {
            "create_customer": "POST /customers",
            "get_customer": "GET /customers/{id}",
            "find_customer": "GET /customers?name=&email=",
            "update_customer": "PUT /customers/{id}",
            "delete_customer": "DELETE /customers/{id}"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "customer_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        workers=settings.api_workers if not settings.debug else 1
    )
