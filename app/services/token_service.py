# app/services/token_service.py
import jwt
import uuid
from datetime import datetime, timedelta, timezone
import logging

from pydantic import ValidationError

from app.models.auth import ActorRole, TokenPayload
from app.services.exceptions import UnauthorizedError

logger = logging.getLogger("rides.auth")


class TokenIssuer:
    """Issues and verifies JWT session tokens for a single actor role.

    Each role gets its own issuer with its own secret, so a rider token is
    rejected by the captain issuer and vice versa.
    """

    def __init__(self, role: ActorRole, secret: str, algorithm: str = "HS256", expire_days: int = 7):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self.role = role
        self._secret = secret
        self.algorithm = algorithm
        self.expire_days = expire_days

    def issue(self, actor_id: str, email: str) -> str:
        """Create a signed session token for an actor."""
        now = datetime.now(timezone.utc)
        payload = {
            "_id": actor_id,
            "email": email,
            "role": self.role.value,
            "iat": now,
            "exp": now + timedelta(days=self.expire_days),
            "jti": uuid.uuid4().hex,
        }
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        logger.debug(f"🔑 Issued {self.role.value} token for {email}")
        return token

    def verify(self, token: str) -> TokenPayload:
        """Verify signature, expiry and role of a token and return its claims."""
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning(f"⚠️ Expired {self.role.value} token")
            raise UnauthorizedError()
        except jwt.InvalidTokenError as e:
            logger.warning(f"⚠️ Invalid {self.role.value} token: {str(e)}")
            raise UnauthorizedError()

        try:
            payload = TokenPayload.model_validate(claims)
        except ValidationError:
            logger.warning(f"⚠️ {self.role.value} token has malformed claims")
            raise UnauthorizedError()

        if payload.role != self.role:
            logger.warning(f"⚠️ Token for role {payload.role.value} presented to {self.role.value} verifier")
            raise UnauthorizedError()

        return payload
