# app/main.py
"""
Rides backend application factory.

Run with:
    uvicorn app.main:create_app --factory
"""
from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from app.api.captain_routes import router as captain_router
from app.api.user_routes import router as user_router
from app.config.app_config import Settings, load_settings
from app.db.database import Database
from app.dependencies.auth import SessionVerifier
from app.models.auth import ActorRole
from app.services.auth_service import AuthService
from app.services.blacklist_service import TokenBlacklist
from app.services.captain_service import CaptainStore
from app.services.exceptions import AuthError, UnauthorizedError
from app.services.password_service import PasswordHasher
from app.services.token_service import TokenIssuer
from app.services.user_service import UserStore

logger = logging.getLogger("rides.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle events."""
    logger.info("🚀 Rides backend starting up...")
    try:
        app.state.db.init_db()
        logger.info(f"🔐 Session tokens expire after {app.state.settings.auth.token_expire_days} days")
    except Exception as e:
        logger.error(f"Error during application startup: {str(e)}", exc_info=True)
        raise

    yield

    logger.info("🛑 Rides backend shutting down")


async def auth_error_handler(request: Request, exc: AuthError):
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Surface every field error instead of a single message."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"][1:]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors}
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application and its auth object graph.

    Args:
        settings: Configuration; read from the environment when omitted

    Returns:
        FastAPI: The configured application
    """
    if settings is None:
        settings = load_settings()

    logging.basicConfig(level=settings.app.log_level)

    auth_settings = settings.auth
    db = Database(settings.database.path, timeout=settings.database.timeout)
    hasher = PasswordHasher(rounds=auth_settings.password_bcrypt_rounds)
    blacklist = TokenBlacklist(db)

    secrets = {
        ActorRole.USER: auth_settings.user_jwt_secret,
        ActorRole.CAPTAIN: auth_settings.captain_jwt_secret,
    }
    stores = {
        ActorRole.USER: UserStore(db),
        ActorRole.CAPTAIN: CaptainStore(db),
    }

    verifiers = {}
    auth_services = {}
    for role, store in stores.items():
        issuer = TokenIssuer(
            role,
            secrets[role],
            algorithm=auth_settings.jwt_algorithm,
            expire_days=auth_settings.token_expire_days
        )
        verifiers[role] = SessionVerifier(
            role, issuer, store, blacklist, cookie_name=auth_settings.cookie_name
        )
        auth_services[role] = AuthService(role, store, hasher, issuer, blacklist)

    app = FastAPI(
        title=settings.app.title,
        description="Rider and captain registration, login and session management",
        version="1.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.db = db
    app.state.verifiers = verifiers
    app.state.auth_services = auth_services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(user_router)
    app.include_router(captain_router)

    @app.get("/")
    async def root():
        """Root endpoint for liveness checking."""
        return {"status": "running", "message": "Rides backend is running"}

    @app.get("/health")
    async def health_check():
        database_ok = await run_in_threadpool(app.state.db.ping)
        return {
            "status": "healthy" if database_ok else "degraded",
            "services": {
                "database": "connected" if database_ok else "unavailable",
                "authentication": "enabled"
            }
        }

    return app
