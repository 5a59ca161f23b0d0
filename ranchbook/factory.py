import logging
import secrets
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException
from starlette.middleware.sessions import SessionMiddleware

from ranchbook.config import Settings, get_settings
from ranchbook.core.errors import RanchbookError, StorageUnavailable
from ranchbook.database import build_engine, build_session_factory, create_schema
from ranchbook.routers import (
    admin_router,
    auth_router,
    health_records_router,
    health_router,
    inventory_router,
    livestock_router,
    partners_router,
    reports_router,
    transactions_router,
)

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = [str(item) for item in error.get("loc", ()) if item not in ("body", "query", "path")]
        field = ".".join(location) or "request"
        parts.append("{}: {}".format(field, error.get("msg", "invalid value")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RanchbookError)
    async def ranchbook_error_handler(request: Request, exc: RanchbookError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.error)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Validation failed", "error": _describe_validation_errors(exc)},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        return JSONResponse(
            status_code=409,
            content={"message": "Record conflicts with existing data", "error": str(exc.orig)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Storage failure during %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=StorageUnavailable().to_payload())


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    engine = engine or build_engine(settings.DATABASE_URL)
    create_schema(engine)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET or secrets.token_urlsafe(32),
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_TTL_SECONDS,
        same_site="lax",
        https_only=settings.ENVIRONMENT.lower() != "local",
    )
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(livestock_router)
    app.include_router(transactions_router)
    app.include_router(inventory_router)
    app.include_router(partners_router)
    app.include_router(health_records_router)
    app.include_router(reports_router)
    app.include_router(admin_router)

    return app


__all__ = ["create_app", "register_exception_handlers"]
