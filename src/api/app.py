from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from .error import ClientError, ServerError
from src.app.services.rate_limiter import SlidingWindowRateLimiter
import logging

logger = logging.getLogger(__name__)


def error_body(code: str, message: str, **extra) -> dict:
    return {"success": False, "message": message, "code": code, **extra}


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error.code, error.message, **exc.extra),
        headers=exc.headers,
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(exc.base_error.code, "Internal server error"),
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("STORE_UNAVAILABLE", "Internal server error"),
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="JamWathQ Admin API", version="0.1.0")

    # Shared by every request of this app instance
    app.state.config = ApplicationConfig
    app.state.rate_limiter = SlidingWindowRateLimiter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        activity,
        admin_auth,
        admins,
        health_check,
        public_reviews,
        reviews,
        security,
        under_development,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(admin_auth.router, tags=["Admin Authentication"])
    app.include_router(admins.router, tags=["Admins"])
    app.include_router(activity.router, tags=["Activity"])
    app.include_router(security.router, tags=["Security"])
    app.include_router(reviews.router, tags=["Review Moderation"])
    app.include_router(
        public_reviews.router, prefix=ApplicationConfig.API_PREFIX, tags=["Reviews"]
    )
    app.include_router(
        under_development.router,
        prefix=ApplicationConfig.API_PREFIX,
        tags=["Under Development"],
    )

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
