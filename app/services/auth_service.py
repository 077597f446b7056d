# app/services/auth_service.py
from typing import Any, Tuple
import logging

from fastapi.concurrency import run_in_threadpool

from app.db.actor_store import ActorStore
from app.models.auth import ActorRole
from app.services.blacklist_service import TokenBlacklist
from app.services.exceptions import EmailAlreadyInUseError, InvalidCredentialsError
from app.services.password_service import PasswordHasher
from app.services.token_service import TokenIssuer

logger = logging.getLogger("rides.auth")


class AuthService:
    """Register, login and logout for one actor role.

    Blocking work (bcrypt and sqlite) runs in the threadpool so one slow
    request does not hold up the event loop.
    """

    def __init__(
        self,
        role: ActorRole,
        store: ActorStore,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        blacklist: TokenBlacklist,
    ):
        self.role = role
        self.store = store
        self.hasher = hasher
        self.issuer = issuer
        self.blacklist = blacklist

    async def register(self, payload) -> Tuple[Any, str]:
        """Create an actor from a validated payload and issue its first token."""
        if await run_in_threadpool(self.store.email_exists, payload.email):
            logger.warning(f"⚠️ {self.role.value} registration with existing email: {payload.email}")
            raise EmailAlreadyInUseError()

        password_hash = await run_in_threadpool(self.hasher.hash, payload.password)
        actor = await run_in_threadpool(self.store.create, payload, password_hash)
        token = self.issuer.issue(actor.id, actor.email)

        logger.info(f"✅ {self.role.value} registered: {actor.email}")
        return actor, token

    async def login(self, email: str, password: str) -> Tuple[Any, str]:
        """Check credentials and issue a token.

        Unknown email and wrong password raise the same error.
        """
        credentials = await run_in_threadpool(self.store.get_credentials, email)
        if credentials is None:
            await run_in_threadpool(self.hasher.verify_dummy, password)
            logger.warning(f"⚠️ Failed {self.role.value} login attempt for: {email}")
            raise InvalidCredentialsError()

        actor, password_hash = credentials
        if not await run_in_threadpool(self.hasher.verify, password, password_hash):
            logger.warning(f"⚠️ Failed {self.role.value} login attempt for: {email}")
            raise InvalidCredentialsError()

        token = self.issuer.issue(actor.id, actor.email)
        logger.info(f"✅ {self.role.value} logged in: {actor.email}")
        return actor, token

    async def logout(self, token: str) -> None:
        """Blacklist a token signed for this role.

        Already revoked tokens are accepted again, so logout is idempotent.
        """
        payload = self.issuer.verify(token)
        await run_in_threadpool(self.blacklist.revoke, token)
        logger.info(f"✅ {self.role.value} logged out: {payload.email}")
