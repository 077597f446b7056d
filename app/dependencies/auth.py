# app/dependencies/auth.py
from fastapi import Request, Response
from fastapi.concurrency import run_in_threadpool
from typing import Any, Optional
import logging

from app.db.actor_store import ActorStore
from app.models.auth import ActorRole
from app.services.auth_service import AuthService
from app.services.blacklist_service import TokenBlacklist
from app.services.exceptions import ActorNotFoundError, UnauthorizedError
from app.services.token_service import TokenIssuer

logger = logging.getLogger("rides.auth")


def extract_token(request: Request, cookie_name: str = "token") -> Optional[str]:
    """
    Read the session token from the cookie, falling back to the
    Authorization header.

    Returns None when neither carries a usable token.
    """
    token = request.cookies.get(cookie_name)
    if token:
        return token

    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, _, credentials = auth_header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


class SessionVerifier:
    """
    Per-request session gate for one actor role.

    Stages: extract token -> blacklist check -> signature/expiry/role
    check -> actor lookup -> attach to request.state.<role>.
    """

    def __init__(
        self,
        role: ActorRole,
        issuer: TokenIssuer,
        store: ActorStore,
        blacklist: TokenBlacklist,
        cookie_name: str = "token",
    ):
        self.role = role
        self.issuer = issuer
        self.store = store
        self.blacklist = blacklist
        self.cookie_name = cookie_name

    async def verify(self, request: Request) -> Any:
        token = extract_token(request, self.cookie_name)
        if not token:
            logger.debug(f"🔍 No {self.role.value} session token on {request.url.path}")
            raise UnauthorizedError()

        # Revocation is checked before the token is decoded
        if await run_in_threadpool(self.blacklist.is_revoked, token):
            logger.warning(f"⚠️ Blacklisted {self.role.value} token used on {request.url.path}")
            raise UnauthorizedError()

        payload = self.issuer.verify(token)

        actor = await run_in_threadpool(self.store.get_by_id, payload.id)
        if actor is None:
            logger.warning(f"⚠️ {self.role.value} {payload.id} from valid token no longer exists")
            raise ActorNotFoundError(f"{self.role.value.capitalize()} not found")

        setattr(request.state, self.role.value, actor)
        logger.debug(f"🔍 {self.role.value} authenticated: {actor.email}")
        return actor


def require_actor(role: ActorRole):
    """
    Dependency factory that runs the role's SessionVerifier.

    Args:
        role: Actor role whose token is required

    Returns:
        Function that authenticates the request and returns the actor
    """
    async def actor_checker(request: Request):
        verifier: SessionVerifier = request.app.state.verifiers[role]
        return await verifier.verify(request)

    return actor_checker


def get_auth_service(role: ActorRole):
    """Dependency factory returning the role's AuthService."""
    def auth_service_provider(request: Request) -> AuthService:
        return request.app.state.auth_services[role]

    return auth_service_provider


def get_request_token(request: Request) -> str:
    """Dependency: the raw session token, or 401 if none was sent."""
    token = extract_token(request, request.app.state.settings.auth.cookie_name)
    if not token:
        raise UnauthorizedError()
    return token


def set_session_cookie(request: Request, response: Response, token: str) -> None:
    auth_settings = request.app.state.settings.auth
    response.set_cookie(
        key=auth_settings.cookie_name,
        value=token,
        max_age=auth_settings.token_max_age,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite=auth_settings.cookie_samesite,
    )


def clear_session_cookie(request: Request, response: Response) -> None:
    auth_settings = request.app.state.settings.auth
    response.delete_cookie(
        key=auth_settings.cookie_name,
        httponly=True,
        secure=auth_settings.cookie_secure,
        samesite=auth_settings.cookie_samesite,
    )
