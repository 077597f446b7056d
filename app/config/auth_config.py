# app/config/auth_config.py
from pydantic import model_validator
from pydantic_settings import BaseSettings


class AuthSettings(BaseSettings):
    """Authentication configuration settings."""

    # JWT Configuration - one signing secret per actor role
    user_jwt_secret: str
    captain_jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7

    # Password hashing
    password_bcrypt_rounds: int = 10

    # Session cookie
    cookie_name: str = "token"
    cookie_secure: bool = False
    cookie_samesite: str = "lax"

    class Config:
        env_file = ".env"
        env_prefix = "AUTH_"
        extra = "ignore"

    @model_validator(mode="after")
    def secrets_must_differ(self):
        """Riders and captains must never share a signing key."""
        if not self.user_jwt_secret or not self.captain_jwt_secret:
            raise ValueError("JWT secrets must not be empty")
        if self.user_jwt_secret == self.captain_jwt_secret:
            raise ValueError("user and captain JWT secrets must be different")
        return self

    @property
    def token_max_age(self) -> int:
        """Cookie lifetime in seconds, matching the token expiry."""
        return self.token_expire_days * 24 * 60 * 60
