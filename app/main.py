import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.dependencies import get_password_hasher
from app.api.deps import engine
from app.api.routers.auth import router as auth_router
from app.api.routers.cars import router as cars_router
from app.api.routers.health import router as health_router
from app.api.routers.payments import router as payments_router
from app.api.routers.reports import router as reports_router
from app.api.routers.reservations import router as reservations_router
from app.config import get_settings
from app.domain.errors import DomainError
from app.infrastructure.db.seed import seed_reference_data
from app.infrastructure.db.tables import metadata

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        if settings.seed_on_startup:
            await seed_reference_data(conn, get_password_hasher())
    yield
    await engine.dispose()

app = FastAPI(
    title="Car Rental API",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    logger.info(
        "Request rejected",
        extra={"path": request.url.path, "code": exc.code, "status": exc.status_code},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Schema failures are client errors (400), summarised without echoing input values."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    summary = "; ".join(f"{d['field']}: {d['message']}" if d["field"] else d["message"] for d in details)
    return JSONResponse(
        status_code=400,
        content={"error": summary or "Invalid request", "code": "VALIDATION_ERROR", "details": details},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "error_id": error_id},
    )


app.include_router(health_router, tags=["Health"])
app.include_router(auth_router, prefix="/api", tags=["Auth"])
app.include_router(cars_router, prefix="/api", tags=["Catalog"])
app.include_router(reservations_router, prefix="/api", tags=["Reservations"])
app.include_router(payments_router, prefix="/api", tags=["Payments"])
app.include_router(reports_router, prefix="/api", tags=["Reports"])
