"""Domain errors raised by the auth services and rendered by the app."""

from typing import Optional

from fastapi import status


class AuthError(Exception):
    """Base exception; carries the HTTP status it maps to."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmailAlreadyInUseError(AuthError):
    """Registration with an email already taken in the role's store."""
    message = "Email already in use"


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password. Deliberately does not say which."""
    message = "Invalid email or password"


class UnauthorizedError(AuthError):
    """Missing, malformed, expired, foreign-role or revoked session token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ActorNotFoundError(AuthError):
    """A valid token whose subject no longer exists."""
    status_code = status.HTTP_404_NOT_FOUND
    message = "Actor not found"
