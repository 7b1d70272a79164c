from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import infusesecret.models  # noqa: F401  (registers SQLModel tables)

from infusesecret.config import get_settings
from infusesecret.db import create_db_and_tables, dispose_engine
from infusesecret.errors import InfuseSecretError
from infusesecret.routers import admin, health, messages

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    create_db_and_tables()
    logger.info("%s API started", settings.app_name)

    yield

    # Shutdown: drain and close pooled database connections
    dispose_engine()
    logger.info("%s API stopped", settings.app_name)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Secret messages behind QR codes",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(InfuseSecretError)
async def service_error_handler(request: Request, exc: InfuseSecretError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Known path with an unsupported method counts as an unmatched route
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
        status_code = 404
        message = "Route not found"
    else:
        status_code = exc.status_code
        message = str(exc.detail) if exc.detail else "An error occurred"
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure server-side; never leak details to the client."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(health.router)
app.include_router(messages.router)
app.include_router(admin.router)
